"""Theme administration."""
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import ExceptionType, RoomescapeException
from core.logging import get_logger
from db.models_sqlalchemy import Theme
from domain.models import ThemeRequest, ThemeResponse
from repositories import ReservationRepository, ThemeRepository


logger = get_logger(__name__)


class ThemeService:

    def __init__(self, db_session: Session):
        self.db = db_session
        self.theme_repository = ThemeRepository(db_session)
        self.reservation_repository = ReservationRepository(db_session)

    def save(self, request: ThemeRequest) -> ThemeResponse:
        if self.theme_repository.exists_by_name(request.name):
            raise RoomescapeException(ExceptionType.DUPLICATE_THEME)

        theme = self.theme_repository.save(Theme(**request.model_dump()))
        self.db.commit()
        logger.info("Theme created", extra={"theme_id": theme.id})
        return ThemeResponse.model_validate(theme)

    def find_all(self) -> List[ThemeResponse]:
        return [ThemeResponse.model_validate(t) for t in self.theme_repository.find_all()]

    def delete(self, theme_id: int) -> None:
        """Delete a theme no reservation refers to."""
        theme = self.theme_repository.find_by_id(theme_id)
        if theme is None:
            raise RoomescapeException(ExceptionType.NOT_FOUND_THEME)
        if self.reservation_repository.exists_by_theme(theme):
            raise RoomescapeException(ExceptionType.THEME_IN_USE)

        self.theme_repository.delete(theme)
        self.db.commit()
        logger.info("Theme deleted", extra={"theme_id": theme_id})
