"""Member endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from apps.api.deps import get_member_service
from domain.models import MemberRequest, MemberResponse
from services import MemberService


router = APIRouter(prefix="/members", tags=["members"])


@router.get("", response_model=List[MemberResponse])
def list_members(service: MemberService = Depends(get_member_service)):
    return service.find_all()


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def signup(request: MemberRequest, service: MemberService = Depends(get_member_service)):
    return service.signup(request)
