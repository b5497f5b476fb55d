"""Request and response models using Pydantic v2."""

from datetime import date, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import ReservationStatus, Role


class MemberRequest(BaseModel):
    """Model for signing up a member."""

    name: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    model_config = ConfigDict(str_strip_whitespace=True)


class MemberResponse(BaseModel):
    id: int
    name: str
    email: str
    role: Role

    model_config = ConfigDict(from_attributes=True)


class ThemeRequest(BaseModel):
    """Model for creating a theme."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    thumbnail: str = Field(default="", max_length=500)

    model_config = ConfigDict(str_strip_whitespace=True)


class ThemeResponse(BaseModel):
    id: int
    name: str
    description: str
    thumbnail: str

    model_config = ConfigDict(from_attributes=True)


class ReservationTimeRequest(BaseModel):
    """Model for creating a bookable start time."""

    start_at: time


class ReservationTimeResponse(BaseModel):
    id: int
    start_at: time

    model_config = ConfigDict(from_attributes=True)


class AvailableTimeResponse(BaseModel):
    """A start time for a (date, theme) and whether it is already taken."""

    time_id: int
    start_at: time
    already_booked: bool


class SlotRequest(BaseModel):
    """A (theme, date, time) slot as sent by a logged-in member."""

    theme_id: int = Field(..., ge=1)
    date: date
    time_id: int = Field(..., ge=1)


class ReservationRequest(SlotRequest):
    """Model for booking a slot on behalf of a member."""

    member_id: int = Field(..., ge=1)


class ReservationResponse(BaseModel):
    """Complete reservation view."""

    id: int
    date: date
    member: MemberResponse
    theme: ThemeResponse
    time: ReservationTimeResponse


class WaitingRequest(ReservationRequest):
    """Model for joining the waiting list of a reserved slot."""

    pass


class WaitingResponse(BaseModel):
    id: int
    reservation_id: int
    date: date
    member: MemberResponse
    theme: ThemeResponse
    time: ReservationTimeResponse


class LoginMemberReservationResponse(BaseModel):
    """One line of a member's own bookings, reserved or waiting."""

    id: int
    theme: str
    date: date
    time: time
    status: ReservationStatus
    rank: Optional[int] = Field(None, ge=1, description="Position in the waiting list")
