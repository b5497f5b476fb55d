"""Theme endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from apps.api.deps import get_admin_member, get_theme_service
from domain.models import ThemeRequest, ThemeResponse
from services import ThemeService


router = APIRouter(prefix="/themes", tags=["themes"])


@router.get("", response_model=List[ThemeResponse])
def list_themes(service: ThemeService = Depends(get_theme_service)):
    return service.find_all()


@router.post(
    "",
    response_model=ThemeResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_admin_member)],
)
def create_theme(request: ThemeRequest, service: ThemeService = Depends(get_theme_service)):
    return service.save(request)


@router.delete(
    "/{theme_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_admin_member)],
)
def delete_theme(theme_id: int, service: ThemeService = Depends(get_theme_service)):
    service.delete(theme_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
