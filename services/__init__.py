"""Service layer: one class per aggregate, one unit of work per method."""

from .member_service import MemberService
from .reservation_service import ReservationService
from .reservation_time_service import ReservationTimeService
from .theme_service import ThemeService
from .waiting_service import WaitingService

__all__ = [
    "MemberService",
    "ReservationService",
    "ReservationTimeService",
    "ThemeService",
    "WaitingService",
]
