"""Finders resolve entity ids before a service operation proceeds."""
from sqlalchemy.orm import Session

from core.exceptions import ExceptionType, RoomescapeException
from db.models_sqlalchemy import Member, Reservation, ReservationTime, Theme
from domain.models import ReservationRequest
from repositories import (
    MemberRepository,
    ReservationRepository,
    ReservationTimeRepository,
    ThemeRepository,
)


class MemberFinder:

    def __init__(self, session: Session):
        self.member_repository = MemberRepository(session)

    def find_by_id(self, member_id: int) -> Member:
        member = self.member_repository.find_by_id(member_id)
        if member is None:
            raise RoomescapeException(ExceptionType.NOT_FOUND_MEMBER)
        return member


class ReservationFinder:
    """Resolves reservations and builds new ones from booking requests."""

    def __init__(self, session: Session):
        self.reservation_repository = ReservationRepository(session)
        self.theme_repository = ThemeRepository(session)
        self.time_repository = ReservationTimeRepository(session)
        self.member_finder = MemberFinder(session)

    def find_by_id(self, reservation_id: int) -> Reservation:
        reservation = self.reservation_repository.find_by_id(reservation_id)
        if reservation is None:
            raise RoomescapeException(ExceptionType.NOT_FOUND_RESERVATION)
        return reservation

    def find_theme(self, theme_id: int) -> Theme:
        theme = self.theme_repository.find_by_id(theme_id)
        if theme is None:
            raise RoomescapeException(ExceptionType.NOT_FOUND_THEME)
        return theme

    def find_time(self, time_id: int) -> ReservationTime:
        reservation_time = self.time_repository.find_by_id(time_id)
        if reservation_time is None:
            raise RoomescapeException(ExceptionType.NOT_FOUND_TIME)
        return reservation_time

    def create_when_not_exists(self, request: ReservationRequest) -> Reservation:
        """
        Build an unsaved reservation for the requested slot.

        Raises:
            RoomescapeException: NOT_FOUND_MEMBER / NOT_FOUND_THEME / NOT_FOUND_TIME
                when a referenced entity is missing, DUPLICATE_RESERVATION when
                the (theme, date, time) slot is already taken
        """
        member = self.member_finder.find_by_id(request.member_id)
        theme = self.find_theme(request.theme_id)
        reservation_time = self.find_time(request.time_id)

        if self.reservation_repository.exists_by_theme_and_date_and_time(theme, request.date, reservation_time):
            raise RoomescapeException(ExceptionType.DUPLICATE_RESERVATION)

        return Reservation(
            reservation_member=member,
            theme=theme,
            date=request.date,
            time=reservation_time,
        )

    def find_by_slot(self, request: ReservationRequest) -> Reservation:
        """Existing reservation for the requested (theme, date, time)."""
        theme = self.find_theme(request.theme_id)
        reservation_time = self.find_time(request.time_id)
        reservation = self.reservation_repository.find_by_theme_and_date_and_time(
            theme, request.date, reservation_time
        )
        if reservation is None:
            raise RoomescapeException(ExceptionType.NOT_FOUND_RESERVATION)
        return reservation
