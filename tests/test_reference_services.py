"""Unit tests for theme, reservation time and member services."""
import pytest
from datetime import time, timedelta

from core.exceptions import ExceptionType, RoomescapeException
from domain.enums import Role
from domain.models import MemberRequest, ReservationTimeRequest, ThemeRequest


@pytest.mark.unit
class TestThemeService:

    def test_save_and_list(self, theme_service):
        created = theme_service.save(ThemeRequest(name="  Space Station ", description="Zero gravity"))

        themes = theme_service.find_all()

        assert [t.id for t in themes] == [created.id]
        assert themes[0].name == "Space Station"
        assert themes[0].thumbnail == ""

    def test_duplicate_name_rejected(self, theme_service, theme):
        with pytest.raises(RoomescapeException) as exc_info:
            theme_service.save(ThemeRequest(name=theme.name))

        assert exc_info.value.type is ExceptionType.DUPLICATE_THEME

    def test_delete_unused_theme(self, theme_service, theme):
        theme_service.delete(theme.id)

        assert theme_service.find_all() == []

    def test_delete_theme_in_use_rejected(self, book, theme_service, owner, theme):
        book(owner)

        with pytest.raises(RoomescapeException) as exc_info:
            theme_service.delete(theme.id)

        assert exc_info.value.type is ExceptionType.THEME_IN_USE

    def test_delete_missing_theme(self, theme_service):
        with pytest.raises(RoomescapeException) as exc_info:
            theme_service.delete(999)

        assert exc_info.value.type is ExceptionType.NOT_FOUND_THEME


@pytest.mark.unit
class TestReservationTimeService:

    def test_times_listed_by_start(self, time_service):
        late = time_service.save(ReservationTimeRequest(start_at=time(21, 0)))
        early = time_service.save(ReservationTimeRequest(start_at=time(9, 30)))

        assert [t.id for t in time_service.find_all()] == [early.id, late.id]

    def test_duplicate_time_rejected(self, time_service, morning):
        with pytest.raises(RoomescapeException) as exc_info:
            time_service.save(ReservationTimeRequest(start_at=morning.start_at))

        assert exc_info.value.type is ExceptionType.DUPLICATE_TIME

    def test_available_times(self, book, time_service, owner, theme, morning, evening, tomorrow):
        """Test that only the booked slot of that date and theme is flagged."""
        book(owner)
        book(owner, reservation_date=tomorrow + timedelta(days=1), reservation_time=evening)

        available = time_service.find_available_times(tomorrow, theme.id)

        assert [(a.time_id, a.already_booked) for a in available] == [(morning.id, True), (evening.id, False)]

    def test_delete_time_in_use_rejected(self, book, time_service, owner, morning):
        book(owner)

        with pytest.raises(RoomescapeException) as exc_info:
            time_service.delete(morning.id)

        assert exc_info.value.type is ExceptionType.TIME_IN_USE

    def test_delete_unused_time(self, time_service, morning, evening):
        time_service.delete(evening.id)

        assert [t.id for t in time_service.find_all()] == [morning.id]

    def test_delete_missing_time(self, time_service):
        with pytest.raises(RoomescapeException) as exc_info:
            time_service.delete(999)

        assert exc_info.value.type is ExceptionType.NOT_FOUND_TIME


@pytest.mark.unit
class TestMemberService:

    def test_signup_creates_regular_member(self, member_service):
        member = member_service.signup(MemberRequest(name="Jane", email="jane@roomescape.test"))

        assert member.role == Role.USER
        assert [m.email for m in member_service.find_all()] == ["jane@roomescape.test"]

    def test_duplicate_email_rejected(self, member_service):
        member_service.signup(MemberRequest(name="Jane", email="jane@roomescape.test"))

        with pytest.raises(RoomescapeException) as exc_info:
            member_service.signup(MemberRequest(name="Janet", email="jane@roomescape.test"))

        assert exc_info.value.type is ExceptionType.DUPLICATE_MEMBER

    def test_invalid_email_rejected(self):
        with pytest.raises(ValueError):
            MemberRequest(name="Jane", email="not-an-email")
