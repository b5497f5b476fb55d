"""Pytest configuration and fixtures for reservation backend tests."""
import pytest
from datetime import date, datetime, time, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.models_sqlalchemy import Member, Theme, ReservationTime
from db.session import drop_db, init_db
from domain.enums import Role
from domain.models import ReservationRequest, WaitingRequest
from services import (
    MemberService,
    ReservationService,
    ReservationTimeService,
    ThemeService,
    WaitingService,
)


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    drop_db(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for testing."""
    SessionLocal = sessionmaker(bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def base_time():
    """Provide a fixed 'now' for consistent testing."""
    return datetime(2024, 3, 15, 12, 0)  # Noon on March 15, 2024


@pytest.fixture(scope="function")
def tomorrow(base_time):
    return base_time.date() + timedelta(days=1)


@pytest.fixture(scope="function")
def clock(base_time):
    return lambda: base_time


@pytest.fixture(scope="function")
def reservation_service(db_session, clock):
    return ReservationService(db_session, clock=clock)


@pytest.fixture(scope="function")
def waiting_service(db_session, clock):
    return WaitingService(db_session, clock=clock)


@pytest.fixture(scope="function")
def theme_service(db_session):
    return ThemeService(db_session)


@pytest.fixture(scope="function")
def time_service(db_session):
    return ReservationTimeService(db_session)


@pytest.fixture(scope="function")
def member_service(db_session):
    return MemberService(db_session)


@pytest.fixture(scope="function")
def create_member(db_session):
    """Factory fixture to insert a member."""
    counter = {"n": 0}

    def _create(name=None, role=Role.USER):
        counter["n"] += 1
        member = Member(
            name=name or f"Member {counter['n']}",
            email=f"member{counter['n']}@roomescape.test",
            role=role.value,
        )
        db_session.add(member)
        db_session.commit()
        return member
    return _create


@pytest.fixture(scope="function")
def admin(create_member):
    return create_member(name="Admin", role=Role.ADMIN)


@pytest.fixture(scope="function")
def owner(create_member):
    return create_member(name="Owner")


@pytest.fixture(scope="function")
def other_member(create_member):
    return create_member(name="Other")


@pytest.fixture(scope="function")
def theme(db_session):
    theme = Theme(name="Haunted Library", description="Find the lost manuscript", thumbnail="library.png")
    db_session.add(theme)
    db_session.commit()
    return theme


@pytest.fixture(scope="function")
def morning(db_session):
    reservation_time = ReservationTime(start_at=time(10, 0))
    db_session.add(reservation_time)
    db_session.commit()
    return reservation_time


@pytest.fixture(scope="function")
def evening(db_session):
    reservation_time = ReservationTime(start_at=time(19, 0))
    db_session.add(reservation_time)
    db_session.commit()
    return reservation_time


@pytest.fixture(scope="function")
def book(reservation_service, theme, morning, tomorrow):
    """Factory fixture to book a slot; defaults to tomorrow morning."""
    def _book(member, reservation_date: date = None, reservation_time=None, booked_theme=None):
        return reservation_service.save(
            ReservationRequest(
                member_id=member.id,
                theme_id=(booked_theme or theme).id,
                date=reservation_date or tomorrow,
                time_id=(reservation_time or morning).id,
            )
        )
    return _book


@pytest.fixture(scope="function")
def wait(waiting_service, theme, morning, tomorrow):
    """Factory fixture to join the waiting list of a slot; defaults to tomorrow morning."""
    def _wait(member, reservation_date: date = None, reservation_time=None):
        return waiting_service.save(
            WaitingRequest(
                member_id=member.id,
                theme_id=theme.id,
                date=reservation_date or tomorrow,
                time_id=(reservation_time or morning).id,
            )
        )
    return _wait
