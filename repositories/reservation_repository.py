"""Reservation store: persistence and query methods for reservations."""
from datetime import date
from typing import List, Optional

from sqlalchemy import and_, exists, select
from sqlalchemy.orm import Session

from db.models_sqlalchemy import Reservation, ReservationTime, Theme


class ReservationRepository:
    """Query methods over the ``reservations`` table."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, reservation: Reservation) -> Reservation:
        self.session.add(reservation)
        self.session.flush()
        return reservation

    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        return self.session.get(Reservation, reservation_id)

    def find_all(self) -> List[Reservation]:
        return list(self.session.scalars(select(Reservation).order_by(Reservation.id)))

    def find_by_member_and_theme_between_dates(
        self,
        member_id: int,
        theme_id: int,
        start: date,
        end: date,
    ) -> List[Reservation]:
        """
        Reservations of one member for one theme with ``start <= date <= end``.

        Args:
            member_id: Owning member
            theme_id: Theme of the reservations
            start: First date, inclusive
            end: Last date, inclusive

        Returns:
            List of Reservation objects ordered by date, then id
        """
        query = select(Reservation).where(
            and_(
                Reservation.member_id == member_id,
                Reservation.theme_id == theme_id,
                Reservation.date.between(start, end),
            )
        ).order_by(Reservation.date, Reservation.id)
        return list(self.session.scalars(query))

    def find_all_by_member_id(self, member_id: int) -> List[Reservation]:
        query = select(Reservation).where(Reservation.member_id == member_id).order_by(Reservation.id)
        return list(self.session.scalars(query))

    def find_all_by_date_and_theme_id(self, reservation_date: date, theme_id: int) -> List[Reservation]:
        query = select(Reservation).where(
            and_(
                Reservation.date == reservation_date,
                Reservation.theme_id == theme_id,
            )
        ).order_by(Reservation.id)
        return list(self.session.scalars(query))

    def exists_by_theme_and_date_and_time(
        self,
        theme: Theme,
        reservation_date: date,
        reservation_time: ReservationTime,
    ) -> bool:
        return self.session.scalar(
            select(
                exists().where(
                    Reservation.theme_id == theme.id,
                    Reservation.date == reservation_date,
                    Reservation.time_id == reservation_time.id,
                )
            )
        )

    def find_by_theme_and_date_and_time(
        self,
        theme: Theme,
        reservation_date: date,
        reservation_time: ReservationTime,
    ) -> Optional[Reservation]:
        query = select(Reservation).where(
            Reservation.theme_id == theme.id,
            Reservation.date == reservation_date,
            Reservation.time_id == reservation_time.id,
        )
        return self.session.scalars(query).first()

    def exists_by_time(self, reservation_time: ReservationTime) -> bool:
        return self.session.scalar(select(exists().where(Reservation.time_id == reservation_time.id)))

    def exists_by_theme(self, theme: Theme) -> bool:
        return self.session.scalar(select(exists().where(Reservation.theme_id == theme.id)))

    def exists_by_id(self, reservation_id: int) -> bool:
        return self.session.scalar(select(exists().where(Reservation.id == reservation_id)))

    def delete(self, reservation_id: int) -> None:
        reservation = self.find_by_id(reservation_id)
        if reservation is not None:
            self.session.delete(reservation)
            self.session.flush()
