"""Unit tests for the waiting service."""
import pytest
from datetime import timedelta
from unittest.mock import patch

from core.exceptions import ExceptionType, RoomescapeException
from db.models_sqlalchemy import ReservationWaiting
from domain.enums import ReservationStatus
from domain.models import WaitingRequest
from repositories import ReservationWaitingRepository


@pytest.mark.unit
class TestWaitingSave:
    """Test joining a waiting list."""

    def test_wait_for_reserved_slot(self, book, wait, owner, other_member, theme, morning, tomorrow):
        reservation = book(owner)

        waiting = wait(other_member)

        assert waiting.reservation_id == reservation.id
        assert waiting.member.id == other_member.id
        assert waiting.theme.name == theme.name
        assert waiting.time.start_at == morning.start_at
        assert waiting.date == tomorrow

    def test_wait_for_free_slot_rejected(self, wait, other_member, theme, morning):
        with pytest.raises(RoomescapeException) as exc_info:
            wait(other_member)

        assert exc_info.value.type is ExceptionType.NOT_FOUND_RESERVATION

    def test_wait_for_own_reservation_rejected(self, book, wait, owner):
        book(owner)

        with pytest.raises(RoomescapeException) as exc_info:
            wait(owner)

        assert exc_info.value.type is ExceptionType.ALREADY_RESERVED

    def test_wait_twice_rejected(self, book, wait, owner, other_member, db_session):
        """Test that a member holds at most one waiting entry per reservation."""
        book(owner)
        wait(other_member)

        with pytest.raises(RoomescapeException) as exc_info:
            wait(other_member)

        assert exc_info.value.type is ExceptionType.DUPLICATE_WAITING
        assert db_session.query(ReservationWaiting).count() == 1

    def test_concurrent_duplicate_caught_by_unique_constraint(self, book, wait, owner, other_member, db_session):
        """Test a waiting entry that slips past the existence check still fails as a duplicate."""
        book(owner)
        wait(other_member)

        with patch.object(ReservationWaitingRepository, "exists_by_reservation_and_waiting_member", return_value=False):
            with pytest.raises(RoomescapeException) as exc_info:
                wait(other_member)

        assert exc_info.value.type is ExceptionType.DUPLICATE_WAITING
        assert db_session.query(ReservationWaiting).count() == 1

    def test_wait_for_past_slot_rejected(
        self, book, waiting_service, owner, other_member, theme, morning, tomorrow, base_time
    ):
        book(owner)
        waiting_service.clock = lambda: base_time + timedelta(days=2)

        with pytest.raises(RoomescapeException) as exc_info:
            waiting_service.save(
                WaitingRequest(member_id=other_member.id, theme_id=theme.id, date=tomorrow, time_id=morning.id)
            )

        assert exc_info.value.type is ExceptionType.PAST_TIME_RESERVATION

    def test_wait_unknown_member(self, book, waiting_service, owner, theme, morning, tomorrow):
        book(owner)

        with pytest.raises(RoomescapeException) as exc_info:
            waiting_service.save(WaitingRequest(member_id=999, theme_id=theme.id, date=tomorrow, time_id=morning.id))

        assert exc_info.value.type is ExceptionType.NOT_FOUND_MEMBER


@pytest.mark.unit
class TestWaitingListing:

    def test_find_all(self, book, wait, waiting_service, owner, other_member, create_member):
        book(owner)
        first = wait(other_member)
        second = wait(create_member())

        assert [w.id for w in waiting_service.find_all()] == [first.id, second.id]

    def test_find_by_member_id_with_rank(self, book, wait, waiting_service, owner, other_member, create_member, evening):
        """Test each waiting line carries its position in its own queue."""
        book(owner)
        book(owner, reservation_time=evening)
        wait(create_member())
        morning_waiting = wait(other_member)
        evening_waiting = wait(other_member, reservation_time=evening)

        lines = waiting_service.find_by_member_id(other_member.id)

        assert [(line.id, line.rank) for line in lines] == [(morning_waiting.id, 2), (evening_waiting.id, 1)]
        assert all(line.status == ReservationStatus.WAITING for line in lines)

    def test_rank_moves_up_after_promotion(
        self, book, wait, waiting_service, reservation_service, owner, other_member, create_member
    ):
        reservation = book(owner)
        wait(create_member())
        wait(other_member)

        reservation_service.delete(owner.id, reservation.id)

        lines = waiting_service.find_by_member_id(other_member.id)
        assert [line.rank for line in lines] == [1]


@pytest.mark.unit
class TestWaitingDelete:

    def test_member_leaves_waiting_list(self, book, wait, waiting_service, owner, other_member, db_session):
        book(owner)
        waiting = wait(other_member)

        waiting_service.delete(other_member.id, waiting.id)

        assert db_session.get(ReservationWaiting, waiting.id) is None

    def test_admin_removes_waiting(self, book, wait, waiting_service, owner, other_member, admin, db_session):
        book(owner)
        waiting = wait(other_member)

        waiting_service.delete(admin.id, waiting.id)

        assert db_session.get(ReservationWaiting, waiting.id) is None

    def test_other_member_permission_denied(self, book, wait, waiting_service, owner, other_member, db_session):
        book(owner)
        waiting = wait(other_member)

        with pytest.raises(RoomescapeException) as exc_info:
            waiting_service.delete(owner.id, waiting.id)

        assert exc_info.value.type is ExceptionType.PERMISSION_DENIED
        assert db_session.get(ReservationWaiting, waiting.id) is not None

    def test_missing_waiting(self, waiting_service, admin):
        with pytest.raises(RoomescapeException) as exc_info:
            waiting_service.delete(admin.id, 999)

        assert exc_info.value.type is ExceptionType.NOT_FOUND_WAITING

    def test_missing_waiting_checked_before_permission(self, waiting_service, owner):
        """A regular member asking for an unknown id sees it as missing, not forbidden."""
        with pytest.raises(RoomescapeException) as exc_info:
            waiting_service.delete(owner.id, 999)

        assert exc_info.value.type is ExceptionType.NOT_FOUND_WAITING
