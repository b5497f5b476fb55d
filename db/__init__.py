"""Database layer for the reservation backend."""

from .base import Base, TimestampMixin
from .models_sqlalchemy import Member, Theme, ReservationTime, Reservation, ReservationWaiting
from .session import (
    engine,
    SessionLocal,
    get_session,
    init_db,
    drop_db,
    close_db,
)

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Models
    "Member",
    "Theme",
    "ReservationTime",
    "Reservation",
    "ReservationWaiting",
    # Session
    "engine",
    "SessionLocal",
    "get_session",
    "init_db",
    "drop_db",
    "close_db",
]
