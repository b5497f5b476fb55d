"""Domain layer for the room escape reservation backend."""

from .enums import Role, ReservationStatus
from .models import (
    MemberRequest,
    MemberResponse,
    ThemeRequest,
    ThemeResponse,
    ReservationTimeRequest,
    ReservationTimeResponse,
    AvailableTimeResponse,
    SlotRequest,
    ReservationRequest,
    ReservationResponse,
    WaitingRequest,
    WaitingResponse,
    LoginMemberReservationResponse,
)

__all__ = [
    # Enums
    "Role",
    "ReservationStatus",
    # Models
    "MemberRequest",
    "MemberResponse",
    "ThemeRequest",
    "ThemeResponse",
    "ReservationTimeRequest",
    "ReservationTimeResponse",
    "AvailableTimeResponse",
    "SlotRequest",
    "ReservationRequest",
    "ReservationResponse",
    "WaitingRequest",
    "WaitingResponse",
    "LoginMemberReservationResponse",
]
