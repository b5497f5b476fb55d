"""Waiting list for slots that are already reserved."""
from datetime import datetime
from typing import Callable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.exceptions import ExceptionType, RoomescapeException
from core.logging import get_logger
from core.utils_datetime import now_local
from db.models_sqlalchemy import ReservationWaiting
from domain.models import LoginMemberReservationResponse, WaitingRequest, WaitingResponse
from repositories import ReservationWaitingRepository
from services.finders import MemberFinder, ReservationFinder
from services.mappers import to_login_member_waiting_response, to_waiting_response


logger = get_logger(__name__)


class WaitingService:
    """Service for joining, listing and leaving waiting lists."""

    def __init__(self, db_session: Session, clock: Callable[[], datetime] = now_local):
        self.db = db_session
        self.clock = clock
        self.waiting_repository = ReservationWaitingRepository(db_session)
        self.reservation_finder = ReservationFinder(db_session)
        self.member_finder = MemberFinder(db_session)

    def save(self, request: WaitingRequest) -> WaitingResponse:
        """
        Queue a member behind the reservation holding the requested slot.

        Raises:
            RoomescapeException: NOT_FOUND_RESERVATION if the slot is free,
                PAST_TIME_RESERVATION if it has already started,
                ALREADY_RESERVED if the member holds the reservation,
                DUPLICATE_WAITING if the member already waits for it
        """
        member = self.member_finder.find_by_id(request.member_id)
        reservation = self.reservation_finder.find_by_slot(request)

        if reservation.is_before(self.clock()):
            raise RoomescapeException(ExceptionType.PAST_TIME_RESERVATION)
        if reservation.reservation_member.has_id_of(member.id):
            raise RoomescapeException(ExceptionType.ALREADY_RESERVED)
        if self.waiting_repository.exists_by_reservation_and_waiting_member(reservation, member):
            raise RoomescapeException(ExceptionType.DUPLICATE_WAITING)

        try:
            saved = self.waiting_repository.save(
                ReservationWaiting(reservation=reservation, waiting_member=member)
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise RoomescapeException(ExceptionType.DUPLICATE_WAITING)

        logger.info(
            "Waiting entry created",
            extra={"waiting_id": saved.id, "reservation_id": reservation.id, "member_id": member.id},
        )
        return to_waiting_response(saved)

    def find_all(self) -> List[WaitingResponse]:
        return [to_waiting_response(w) for w in self.waiting_repository.find_all()]

    def find_by_member_id(self, member_id: int) -> List[LoginMemberReservationResponse]:
        """A member's waiting entries, each with its 1-based rank in its queue."""
        responses = []
        for waiting in self.waiting_repository.find_all_by_waiting_member_id(member_id):
            queue = self.waiting_repository.find_all_by_reservation(waiting.reservation)
            rank = [w.id for w in queue].index(waiting.id) + 1
            responses.append(to_login_member_waiting_response(waiting, rank))
        return responses

    def delete(self, request_member_id: int, waiting_id: int) -> None:
        """
        Remove a waiting entry.

        Unlike reservation cancellation, existence is checked before
        permission: a missing id is NOT_FOUND_WAITING for any requester,
        then PERMISSION_DENIED unless the requester is an administrator or
        the waiting member.
        """
        waiting = self.waiting_repository.find_by_id(waiting_id)
        if waiting is None:
            raise RoomescapeException(ExceptionType.NOT_FOUND_WAITING)

        request_member = self.member_finder.find_by_id(request_member_id)
        if not (request_member.is_admin() or waiting.waiting_member.has_id_of(request_member_id)):
            raise RoomescapeException(ExceptionType.PERMISSION_DENIED)

        self.waiting_repository.delete(waiting_id)
        self.db.commit()
        logger.info("Waiting entry deleted", extra={"waiting_id": waiting_id})
