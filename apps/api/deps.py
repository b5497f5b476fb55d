"""FastAPI dependencies."""
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from core.exceptions import ExceptionType, RoomescapeException
from db.models_sqlalchemy import Member
from db.session import get_session
from services import (
    MemberService,
    ReservationService,
    ReservationTimeService,
    ThemeService,
    WaitingService,
)
from services.finders import MemberFinder


def get_db():
    """Yield the request's database session (one unit of work per request)."""
    yield from get_session()


def get_request_member_id(x_member_id: int = Header(..., ge=1)) -> int:
    """Id of the member making the request, taken from the ``X-Member-Id`` header."""
    return x_member_id


def get_admin_member(
    member_id: int = Depends(get_request_member_id),
    db: Session = Depends(get_db),
) -> Member:
    """Requesting member, rejected with PERMISSION_DENIED unless an administrator."""
    member = MemberFinder(db).find_by_id(member_id)
    if not member.is_admin():
        raise RoomescapeException(ExceptionType.PERMISSION_DENIED)
    return member


def get_reservation_service(db: Session = Depends(get_db)) -> ReservationService:
    return ReservationService(db)


def get_waiting_service(db: Session = Depends(get_db)) -> WaitingService:
    return WaitingService(db)


def get_theme_service(db: Session = Depends(get_db)) -> ThemeService:
    return ThemeService(db)


def get_time_service(db: Session = Depends(get_db)) -> ReservationTimeService:
    return ReservationTimeService(db)


def get_member_service(db: Session = Depends(get_db)) -> MemberService:
    return MemberService(db)
