"""Reservation time endpoints."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from apps.api.deps import get_admin_member, get_time_service
from domain.models import AvailableTimeResponse, ReservationTimeRequest, ReservationTimeResponse
from services import ReservationTimeService


router = APIRouter(prefix="/times", tags=["times"])


@router.get("", response_model=List[ReservationTimeResponse])
def list_times(service: ReservationTimeService = Depends(get_time_service)):
    return service.find_all()


@router.get("/available", response_model=List[AvailableTimeResponse])
def list_available_times(
    day: date = Query(..., alias="date", description="Day to check"),
    theme_id: int = Query(..., ge=1, description="Theme to check"),
    service: ReservationTimeService = Depends(get_time_service),
):
    """Every start time for the day and theme, flagged when already booked."""
    return service.find_available_times(day, theme_id)


@router.post(
    "",
    response_model=ReservationTimeResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_admin_member)],
)
def create_time(request: ReservationTimeRequest, service: ReservationTimeService = Depends(get_time_service)):
    return service.save(request)


@router.delete(
    "/{time_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_admin_member)],
)
def delete_time(time_id: int, service: ReservationTimeService = Depends(get_time_service)):
    service.delete(time_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
