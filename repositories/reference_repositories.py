"""Stores for members, themes and reservation times."""
from datetime import time
from typing import List, Optional

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from db.models_sqlalchemy import Member, ReservationTime, Theme


class MemberRepository:

    def __init__(self, session: Session):
        self.session = session

    def save(self, member: Member) -> Member:
        self.session.add(member)
        self.session.flush()
        return member

    def find_by_id(self, member_id: int) -> Optional[Member]:
        return self.session.get(Member, member_id)

    def find_all(self) -> List[Member]:
        return list(self.session.scalars(select(Member).order_by(Member.id)))

    def exists_by_email(self, email: str) -> bool:
        return self.session.scalar(select(exists().where(Member.email == email)))


class ThemeRepository:

    def __init__(self, session: Session):
        self.session = session

    def save(self, theme: Theme) -> Theme:
        self.session.add(theme)
        self.session.flush()
        return theme

    def find_by_id(self, theme_id: int) -> Optional[Theme]:
        return self.session.get(Theme, theme_id)

    def find_all(self) -> List[Theme]:
        return list(self.session.scalars(select(Theme).order_by(Theme.id)))

    def exists_by_name(self, name: str) -> bool:
        return self.session.scalar(select(exists().where(Theme.name == name)))

    def delete(self, theme: Theme) -> None:
        self.session.delete(theme)
        self.session.flush()


class ReservationTimeRepository:

    def __init__(self, session: Session):
        self.session = session

    def save(self, reservation_time: ReservationTime) -> ReservationTime:
        self.session.add(reservation_time)
        self.session.flush()
        return reservation_time

    def find_by_id(self, time_id: int) -> Optional[ReservationTime]:
        return self.session.get(ReservationTime, time_id)

    def find_all(self) -> List[ReservationTime]:
        return list(self.session.scalars(select(ReservationTime).order_by(ReservationTime.start_at)))

    def exists_by_start_at(self, start_at: time) -> bool:
        return self.session.scalar(select(exists().where(ReservationTime.start_at == start_at)))

    def delete(self, reservation_time: ReservationTime) -> None:
        self.session.delete(reservation_time)
        self.session.flush()
