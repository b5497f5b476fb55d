"""
Reservation Service for managing room escape reservations.
Handles booking, listing and cancellation with waiting-list promotion.
"""
from datetime import date, datetime
from typing import Callable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.exceptions import ExceptionType, RoomescapeException
from core.logging import get_logger
from core.utils_datetime import now_local
from db.models_sqlalchemy import Reservation, ReservationWaiting
from domain.models import LoginMemberReservationResponse, ReservationRequest, ReservationResponse
from repositories import ReservationRepository, ReservationWaitingRepository
from services.finders import MemberFinder, ReservationFinder
from services.mappers import to_login_member_reservation_response, to_reservation_response


logger = get_logger(__name__)


class ReservationService:
    """Service for booking and cancelling reservations."""

    def __init__(self, db_session: Session, clock: Callable[[], datetime] = now_local):
        """
        Initialize the reservation service.

        Args:
            db_session: SQLAlchemy database session; each public method is one unit of work on it
            clock: Returns the current naive local time, used to reject past bookings
        """
        self.db = db_session
        self.clock = clock
        self.reservation_repository = ReservationRepository(db_session)
        self.waiting_repository = ReservationWaitingRepository(db_session)
        self.reservation_finder = ReservationFinder(db_session)
        self.member_finder = MemberFinder(db_session)

    def save(self, request: ReservationRequest) -> ReservationResponse:
        """
        Book a (theme, date, time) slot for a member.

        Args:
            request: Booking request

        Returns:
            The saved reservation

        Raises:
            RoomescapeException: DUPLICATE_RESERVATION if the slot is taken,
                PAST_TIME_RESERVATION if the slot has already started
        """
        before_save = self.reservation_finder.create_when_not_exists(request)

        self._validate_past_time_reservation(before_save)

        try:
            saved = self.reservation_repository.save(before_save)
            self.db.commit()
        except IntegrityError:
            # slot taken by a concurrent booking after the existence check
            self.db.rollback()
            raise RoomescapeException(ExceptionType.DUPLICATE_RESERVATION)

        logger.info(
            "Reservation created",
            extra={"reservation_id": saved.id, "member_id": request.member_id},
        )
        return to_reservation_response(saved)

    def _validate_past_time_reservation(self, before_save: Reservation) -> None:
        if before_save.is_before(self.clock()):
            logger.warning(
                "Rejected past time reservation",
                extra={"date": str(before_save.date), "time_id": before_save.time.id},
            )
            raise RoomescapeException(ExceptionType.PAST_TIME_RESERVATION)

    def find_all(self) -> List[ReservationResponse]:
        return [to_reservation_response(r) for r in self.reservation_repository.find_all()]

    def find_by_member_and_theme_between_dates(
        self,
        member_id: int,
        theme_id: int,
        start: date,
        end: date,
    ) -> List[ReservationResponse]:
        reservations = self.reservation_repository.find_by_member_and_theme_between_dates(
            member_id, theme_id, start, end
        )
        return [to_reservation_response(r) for r in reservations]

    def find_by_member_id(self, member_id: int) -> List[LoginMemberReservationResponse]:
        reservations = self.reservation_repository.find_all_by_member_id(member_id)
        return [to_login_member_reservation_response(r) for r in reservations]

    def delete(self, request_member_id: int, reservation_id: int) -> None:
        """
        Cancel a reservation.

        When somebody is waiting for the slot, the earliest waiter takes over
        the reservation (same row, same id) and their waiting entry is removed.
        Otherwise the reservation row is deleted.

        Args:
            request_member_id: Member asking for the cancellation
            reservation_id: Reservation to cancel

        Raises:
            RoomescapeException: PERMISSION_DENIED unless the requester is an
                administrator or owns the reservation, NOT_FOUND_RESERVATION
                if the id does not resolve
        """
        if not self._can_delete(request_member_id, reservation_id):
            logger.warning(
                "Reservation cancel denied",
                extra={"reservation_id": reservation_id, "member_id": request_member_id},
            )
            raise RoomescapeException(ExceptionType.PERMISSION_DENIED)

        reservation = self.reservation_finder.find_by_id(reservation_id)

        waiting = self.waiting_repository.find_top_waiting_by_reservation(reservation)
        if waiting is not None:
            self._update_reservation_and_delete_top_waiting(reservation, waiting)
        else:
            self._delete_reservation(reservation_id)

        self.db.commit()

    def _can_delete(self, request_member_id: int, reservation_id: int) -> bool:
        request_member = self.member_finder.find_by_id(request_member_id)
        if request_member.is_admin():
            return True
        return self._is_members_reservation(request_member_id, reservation_id)

    def _is_members_reservation(self, member_id: int, reservation_id: int) -> bool:
        reservation = self.reservation_repository.find_by_id(reservation_id)
        if reservation is None:
            return False
        return reservation.reservation_member.has_id_of(member_id)

    def _update_reservation_and_delete_top_waiting(
        self,
        reservation: Reservation,
        waiting: ReservationWaiting,
    ) -> None:
        waiting_member = waiting.waiting_member
        reservation.update_reservation_member(waiting_member)
        self.waiting_repository.delete(waiting.id)
        logger.info(
            "Reservation handed over to waiting member",
            extra={"reservation_id": reservation.id, "member_id": waiting_member.id},
        )

    def _delete_reservation(self, reservation_id: int) -> None:
        self.reservation_repository.delete(reservation_id)
        logger.info("Reservation deleted", extra={"reservation_id": reservation_id})
