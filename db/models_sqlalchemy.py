"""SQLAlchemy models for the reservation backend tables."""

from datetime import datetime, date as dt_date, time as dt_time

from sqlalchemy import String, Integer, Date, Time, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin
from domain.enums import Role
from core.utils_datetime import combine_slot, now_local


class Member(Base, TimestampMixin):
    """Member table model."""

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=Role.USER.value,
    )

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    def has_id_of(self, member_id: int) -> bool:
        return self.id == member_id

    def __repr__(self) -> str:
        """String representation of Member."""
        return f"<Member(id={self.id}, email='{self.email}', role='{self.role}')>"


class Theme(Base, TimestampMixin):
    """Theme table model."""

    __tablename__ = "themes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
    )

    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
    )

    thumbnail: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
    )

    def __repr__(self) -> str:
        """String representation of Theme."""
        return f"<Theme(id={self.id}, name='{self.name}')>"


class ReservationTime(Base):
    """Bookable start time of day."""

    __tablename__ = "reservation_times"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    start_at: Mapped[dt_time] = mapped_column(
        Time,
        nullable=False,
        unique=True,
    )

    def __repr__(self) -> str:
        """String representation of ReservationTime."""
        return f"<ReservationTime(id={self.id}, start_at={self.start_at})>"


class Reservation(Base, TimestampMixin):
    """Reservation table model. One row per booked (theme, date, time) slot."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id"),
        nullable=False,
        index=True,
    )

    theme_id: Mapped[int] = mapped_column(
        ForeignKey("themes.id"),
        nullable=False,
    )

    date: Mapped[dt_date] = mapped_column(
        Date,
        nullable=False,
        index=True,
    )

    time_id: Mapped[int] = mapped_column(
        ForeignKey("reservation_times.id"),
        nullable=False,
    )

    reservation_member: Mapped[Member] = relationship()
    theme: Mapped[Theme] = relationship()
    time: Mapped[ReservationTime] = relationship()

    __table_args__ = (
        UniqueConstraint("theme_id", "date", "time_id", name="uq_reservations_slot"),
        Index("ix_reservations_theme_date", "theme_id", "date"),
    )

    def is_before(self, moment: datetime) -> bool:
        """Whether the slot starts before ``moment`` (naive local time)."""
        return combine_slot(self.date, self.time.start_at) < moment

    def update_reservation_member(self, member: Member) -> None:
        self.reservation_member = member

    def __repr__(self) -> str:
        """String representation of Reservation."""
        return (
            f"<Reservation(id={self.id}, member_id={self.member_id}, "
            f"theme_id={self.theme_id}, date={self.date}, time_id={self.time_id})>"
        )


class ReservationWaiting(Base):
    """A member queued behind an existing reservation."""

    __tablename__ = "reservation_waitings"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    reservation_id: Mapped[int] = mapped_column(
        ForeignKey("reservations.id"),
        nullable=False,
        index=True,
    )

    waiting_member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        default=now_local,
    )

    reservation: Mapped[Reservation] = relationship()
    waiting_member: Mapped[Member] = relationship()

    __table_args__ = (
        UniqueConstraint("reservation_id", "waiting_member_id", name="uq_reservation_waitings_member"),
    )

    def __repr__(self) -> str:
        """String representation of ReservationWaiting."""
        return (
            f"<ReservationWaiting(id={self.id}, reservation_id={self.reservation_id}, "
            f"waiting_member_id={self.waiting_member_id})>"
        )
