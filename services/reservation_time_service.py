"""Bookable start times and per-day availability."""
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import ExceptionType, RoomescapeException
from core.logging import get_logger
from db.models_sqlalchemy import ReservationTime
from domain.models import AvailableTimeResponse, ReservationTimeRequest, ReservationTimeResponse
from repositories import ReservationRepository, ReservationTimeRepository


logger = get_logger(__name__)


class ReservationTimeService:

    def __init__(self, db_session: Session):
        self.db = db_session
        self.time_repository = ReservationTimeRepository(db_session)
        self.reservation_repository = ReservationRepository(db_session)

    def save(self, request: ReservationTimeRequest) -> ReservationTimeResponse:
        if self.time_repository.exists_by_start_at(request.start_at):
            raise RoomescapeException(ExceptionType.DUPLICATE_TIME)

        reservation_time = self.time_repository.save(ReservationTime(start_at=request.start_at))
        self.db.commit()
        logger.info("Reservation time created", extra={"time_id": reservation_time.id})
        return ReservationTimeResponse.model_validate(reservation_time)

    def find_all(self) -> List[ReservationTimeResponse]:
        return [ReservationTimeResponse.model_validate(t) for t in self.time_repository.find_all()]

    def find_available_times(self, reservation_date: date, theme_id: int) -> List[AvailableTimeResponse]:
        """
        Every start time for a date and theme, flagged when already reserved.

        Args:
            reservation_date: Day to check
            theme_id: Theme to check

        Returns:
            List ordered by start time
        """
        booked_time_ids = {
            r.time_id
            for r in self.reservation_repository.find_all_by_date_and_theme_id(reservation_date, theme_id)
        }
        return [
            AvailableTimeResponse(
                time_id=t.id,
                start_at=t.start_at,
                already_booked=t.id in booked_time_ids,
            )
            for t in self.time_repository.find_all()
        ]

    def delete(self, time_id: int) -> None:
        """Delete a start time no reservation refers to."""
        reservation_time = self.time_repository.find_by_id(time_id)
        if reservation_time is None:
            raise RoomescapeException(ExceptionType.NOT_FOUND_TIME)
        if self.reservation_repository.exists_by_time(reservation_time):
            raise RoomescapeException(ExceptionType.TIME_IN_USE)

        self.time_repository.delete(reservation_time)
        self.db.commit()
        logger.info("Reservation time deleted", extra={"time_id": time_id})
