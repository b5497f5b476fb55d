"""Waiting store: persistence and query methods for waiting-list entries."""
from typing import List, Optional

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from db.models_sqlalchemy import Member, Reservation, ReservationWaiting


# Arrival order: earliest entry first, id breaks ties within one clock tick.
ARRIVAL_ORDER = (ReservationWaiting.created_at, ReservationWaiting.id)


class ReservationWaitingRepository:
    """Query methods over the ``reservation_waitings`` table."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, waiting: ReservationWaiting) -> ReservationWaiting:
        self.session.add(waiting)
        self.session.flush()
        return waiting

    def find_by_id(self, waiting_id: int) -> Optional[ReservationWaiting]:
        return self.session.get(ReservationWaiting, waiting_id)

    def find_all(self) -> List[ReservationWaiting]:
        return list(self.session.scalars(select(ReservationWaiting).order_by(*ARRIVAL_ORDER)))

    def find_all_by_waiting_member_id(self, waiting_member_id: int) -> List[ReservationWaiting]:
        query = (
            select(ReservationWaiting)
            .where(ReservationWaiting.waiting_member_id == waiting_member_id)
            .order_by(*ARRIVAL_ORDER)
        )
        return list(self.session.scalars(query))

    def find_all_by_reservation(self, reservation: Reservation) -> List[ReservationWaiting]:
        query = (
            select(ReservationWaiting)
            .where(ReservationWaiting.reservation_id == reservation.id)
            .order_by(*ARRIVAL_ORDER)
        )
        return list(self.session.scalars(query))

    def find_top_waiting_by_reservation(self, reservation: Reservation) -> Optional[ReservationWaiting]:
        """Earliest waiting entry for the reservation, or None when nobody waits."""
        query = (
            select(ReservationWaiting)
            .where(ReservationWaiting.reservation_id == reservation.id)
            .order_by(*ARRIVAL_ORDER)
            .limit(1)
        )
        return self.session.scalars(query).first()

    def exists_by_reservation_and_waiting_member(self, reservation: Reservation, waiting_member: Member) -> bool:
        return self.session.scalar(
            select(
                exists().where(
                    ReservationWaiting.reservation_id == reservation.id,
                    ReservationWaiting.waiting_member_id == waiting_member.id,
                )
            )
        )

    def delete(self, waiting_id: int) -> None:
        waiting = self.find_by_id(waiting_id)
        if waiting is not None:
            self.session.delete(waiting)
            self.session.flush()
