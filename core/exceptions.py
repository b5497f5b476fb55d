"""Application error types for the reservation backend."""

from enum import Enum


class ExceptionType(Enum):
    """Every failure a service operation can surface, with its HTTP status."""

    NOT_FOUND_RESERVATION = (404, "Reservation does not exist")
    NOT_FOUND_MEMBER = (404, "Member does not exist")
    NOT_FOUND_THEME = (404, "Theme does not exist")
    NOT_FOUND_TIME = (404, "Reservation time does not exist")
    NOT_FOUND_WAITING = (404, "Waiting entry does not exist")

    PAST_TIME_RESERVATION = (400, "Cannot reserve a time that has already passed")
    PERMISSION_DENIED = (403, "Permission denied")

    DUPLICATE_RESERVATION = (409, "This slot is already reserved")
    DUPLICATE_WAITING = (409, "Already waiting for this reservation")
    ALREADY_RESERVED = (409, "Cannot wait for your own reservation")
    DUPLICATE_THEME = (409, "A theme with this name already exists")
    DUPLICATE_TIME = (409, "This reservation time already exists")
    DUPLICATE_MEMBER = (409, "A member with this email already exists")
    THEME_IN_USE = (409, "Theme is used by a reservation")
    TIME_IN_USE = (409, "Reservation time is used by a reservation")

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message


class RoomescapeException(Exception):
    """Raised when a request cannot be fulfilled. Terminal for that request."""

    def __init__(self, exception_type: ExceptionType):
        super().__init__(exception_type.message)
        self.type = exception_type

    @property
    def status_code(self) -> int:
        return self.type.status_code

    def __str__(self) -> str:
        return f"{self.type.name}: {self.type.message}"
