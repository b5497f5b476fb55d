"""Domain enums for the room escape reservation backend."""

from enum import Enum


class Role(str, Enum):
    """Member role."""

    ADMIN = "admin"
    USER = "user"


class ReservationStatus(str, Enum):
    """Status shown to a member for one of their bookings."""

    RESERVED = "reserved"
    WAITING = "waiting"
