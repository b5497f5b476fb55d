"""Tests for store query methods not covered through the services."""
import pytest
from datetime import timedelta

from db.models_sqlalchemy import Reservation
from repositories import ReservationRepository, ReservationWaitingRepository


@pytest.mark.unit
class TestReservationRepository:

    def test_slot_lookup(self, book, owner, theme, morning, evening, tomorrow, db_session):
        reservation = book(owner)
        repository = ReservationRepository(db_session)

        assert repository.exists_by_theme_and_date_and_time(theme, tomorrow, morning)
        assert not repository.exists_by_theme_and_date_and_time(theme, tomorrow, evening)
        assert repository.find_by_theme_and_date_and_time(theme, tomorrow, morning).id == reservation.id
        assert repository.find_by_theme_and_date_and_time(theme, tomorrow + timedelta(days=1), morning) is None

    def test_exists_by_time_and_theme(self, book, owner, theme, morning, evening, db_session):
        book(owner)
        repository = ReservationRepository(db_session)

        assert repository.exists_by_time(morning)
        assert not repository.exists_by_time(evening)
        assert repository.exists_by_theme(theme)

    def test_find_all_by_date_and_theme_id(self, book, owner, theme, evening, tomorrow, db_session):
        first = book(owner)
        second = book(owner, reservation_time=evening)
        book(owner, reservation_date=tomorrow + timedelta(days=1))

        found = ReservationRepository(db_session).find_all_by_date_and_theme_id(tomorrow, theme.id)

        assert [r.id for r in found] == [first.id, second.id]

    def test_delete_missing_is_noop(self, db_session):
        ReservationRepository(db_session).delete(999)

        assert db_session.query(Reservation).count() == 0


@pytest.mark.unit
class TestReservationWaitingRepository:

    def test_lookups(self, book, wait, owner, other_member, create_member, db_session):
        reservation = db_session.get(Reservation, book(owner).id)
        third = create_member()
        first_waiting = wait(other_member)
        second_waiting = wait(third)
        repository = ReservationWaitingRepository(db_session)

        assert [w.id for w in repository.find_all_by_reservation(reservation)] == [first_waiting.id, second_waiting.id]
        assert [w.id for w in repository.find_all_by_waiting_member_id(third.id)] == [second_waiting.id]
        assert repository.exists_by_reservation_and_waiting_member(reservation, other_member)
        assert not repository.exists_by_reservation_and_waiting_member(reservation, owner)
        assert repository.find_top_waiting_by_reservation(reservation).id == first_waiting.id

    def test_no_top_waiting(self, book, owner, db_session):
        reservation = db_session.get(Reservation, book(owner).id)

        assert ReservationWaitingRepository(db_session).find_top_waiting_by_reservation(reservation) is None
