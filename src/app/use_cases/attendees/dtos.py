"""
Attendee Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.base import ensure_utc

DISPLAY_NAME_MAX_LENGTH = 60


class JoinSessionCommand(BaseModel):
    """Join request; display_name is trimmed and capped, blank becomes None"""

    display_name: Optional[str] = None

    @field_validator("display_name")
    @classmethod
    def clean_display_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()[:DISPLAY_NAME_MAX_LENGTH]
        return value or None


class JoinSessionResponse(BaseModel):
    """Credentials handed to the joining client only"""

    attendee_id: str = Field(serialization_alias="attendeeId")
    attendance_code: str = Field(serialization_alias="attendanceCode")


class AttendeeCountResponse(BaseModel):
    count: int
    max: int


class AttendeeResponse(BaseModel):
    """Listed attendee - never carries the attendance code"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    display_name: Optional[str] = None
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, value: datetime) -> datetime:
        return ensure_utc(value)
