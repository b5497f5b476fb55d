"""Reservation endpoints: booking, listing and cancellation."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from apps.api.deps import (
    get_admin_member,
    get_request_member_id,
    get_reservation_service,
    get_waiting_service,
)
from domain.models import (
    LoginMemberReservationResponse,
    ReservationRequest,
    ReservationResponse,
    SlotRequest,
)
from services import ReservationService, WaitingService


router = APIRouter(tags=["reservations"])


@router.post("/reservations", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
def create_reservation(
    slot: SlotRequest,
    member_id: int = Depends(get_request_member_id),
    service: ReservationService = Depends(get_reservation_service),
):
    """Book a slot for the requesting member."""
    return service.save(ReservationRequest(member_id=member_id, **slot.model_dump()))


@router.post(
    "/admin/reservations",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_admin_member)],
)
def create_reservation_for_member(
    request: ReservationRequest,
    service: ReservationService = Depends(get_reservation_service),
):
    """Book a slot on behalf of any member."""
    return service.save(request)


@router.get("/reservations", response_model=List[ReservationResponse])
def list_reservations(service: ReservationService = Depends(get_reservation_service)):
    return service.find_all()


@router.get("/reservations/search", response_model=List[ReservationResponse])
def search_reservations(
    member_id: int = Query(..., ge=1, description="Owning member"),
    theme_id: int = Query(..., ge=1, description="Theme"),
    start: date = Query(..., description="First date, inclusive"),
    end: date = Query(..., description="Last date, inclusive"),
    service: ReservationService = Depends(get_reservation_service),
):
    return service.find_by_member_and_theme_between_dates(member_id, theme_id, start, end)


@router.get("/reservations/mine", response_model=List[LoginMemberReservationResponse])
def list_my_reservations(
    member_id: int = Depends(get_request_member_id),
    reservation_service: ReservationService = Depends(get_reservation_service),
    waiting_service: WaitingService = Depends(get_waiting_service),
):
    """
    The requesting member's reservations followed by their waiting entries.

    Returns:
        List[LoginMemberReservationResponse]: reserved lines, then waiting lines with rank
    """
    return reservation_service.find_by_member_id(member_id) + waiting_service.find_by_member_id(member_id)


@router.delete("/reservations/{reservation_id}", status_code=status.HTTP_204_NO_CONTENT)
def cancel_reservation(
    reservation_id: int,
    member_id: int = Depends(get_request_member_id),
    service: ReservationService = Depends(get_reservation_service),
):
    service.delete(member_id, reservation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
