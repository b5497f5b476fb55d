"""Persistence stores, one per entity."""

from .reservation_repository import ReservationRepository
from .waiting_repository import ReservationWaitingRepository
from .reference_repositories import MemberRepository, ThemeRepository, ReservationTimeRepository

__all__ = [
    "ReservationRepository",
    "ReservationWaitingRepository",
    "MemberRepository",
    "ThemeRepository",
    "ReservationTimeRepository",
]
