"""Member registration and listing."""
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import ExceptionType, RoomescapeException
from core.logging import get_logger
from db.models_sqlalchemy import Member
from domain.enums import Role
from domain.models import MemberRequest, MemberResponse
from repositories import MemberRepository


logger = get_logger(__name__)


class MemberService:

    def __init__(self, db_session: Session):
        self.db = db_session
        self.member_repository = MemberRepository(db_session)

    def signup(self, request: MemberRequest) -> MemberResponse:
        """Register a regular member. Emails are unique."""
        if self.member_repository.exists_by_email(request.email):
            raise RoomescapeException(ExceptionType.DUPLICATE_MEMBER)

        member = self.member_repository.save(
            Member(name=request.name, email=request.email, role=Role.USER.value)
        )
        self.db.commit()
        logger.info("Member registered", extra={"member_id": member.id})
        return MemberResponse.model_validate(member)

    def find_all(self) -> List[MemberResponse]:
        return [MemberResponse.model_validate(m) for m in self.member_repository.find_all()]
