"""Waiting list endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from apps.api.deps import get_request_member_id, get_waiting_service
from domain.models import SlotRequest, WaitingRequest, WaitingResponse
from services import WaitingService


router = APIRouter(prefix="/waitings", tags=["waitings"])


@router.post("", response_model=WaitingResponse, status_code=status.HTTP_201_CREATED)
def create_waiting(
    slot: SlotRequest,
    member_id: int = Depends(get_request_member_id),
    service: WaitingService = Depends(get_waiting_service),
):
    """Join the waiting list of an already reserved slot."""
    return service.save(WaitingRequest(member_id=member_id, **slot.model_dump()))


@router.get("", response_model=List[WaitingResponse])
def list_waitings(service: WaitingService = Depends(get_waiting_service)):
    return service.find_all()


@router.delete("/{waiting_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_waiting(
    waiting_id: int,
    member_id: int = Depends(get_request_member_id),
    service: WaitingService = Depends(get_waiting_service),
):
    service.delete(member_id, waiting_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
