"""Map ORM rows to response models."""
from db.models_sqlalchemy import Reservation, ReservationWaiting
from domain.enums import ReservationStatus
from domain.models import (
    LoginMemberReservationResponse,
    MemberResponse,
    ReservationResponse,
    ReservationTimeResponse,
    ThemeResponse,
    WaitingResponse,
)


def to_reservation_response(reservation: Reservation) -> ReservationResponse:
    return ReservationResponse(
        id=reservation.id,
        date=reservation.date,
        member=MemberResponse.model_validate(reservation.reservation_member),
        theme=ThemeResponse.model_validate(reservation.theme),
        time=ReservationTimeResponse.model_validate(reservation.time),
    )


def to_waiting_response(waiting: ReservationWaiting) -> WaitingResponse:
    reservation = waiting.reservation
    return WaitingResponse(
        id=waiting.id,
        reservation_id=reservation.id,
        date=reservation.date,
        member=MemberResponse.model_validate(waiting.waiting_member),
        theme=ThemeResponse.model_validate(reservation.theme),
        time=ReservationTimeResponse.model_validate(reservation.time),
    )


def to_login_member_reservation_response(reservation: Reservation) -> LoginMemberReservationResponse:
    return LoginMemberReservationResponse(
        id=reservation.id,
        theme=reservation.theme.name,
        date=reservation.date,
        time=reservation.time.start_at,
        status=ReservationStatus.RESERVED,
    )


def to_login_member_waiting_response(waiting: ReservationWaiting, rank: int) -> LoginMemberReservationResponse:
    reservation = waiting.reservation
    return LoginMemberReservationResponse(
        id=waiting.id,
        theme=reservation.theme.name,
        date=reservation.date,
        time=reservation.time.start_at,
        status=ReservationStatus.WAITING,
        rank=rank,
    )
