"""
Session Use Case DTOs (Data Transfer Objects)

Command and Response classes for the session domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.domain.base import ensure_utc
from src.domain.entities import SessionType

# Fields an owner may change through a partial update
MUTABLE_FIELDS = (
    "hobby",
    "title",
    "description",
    "date_time",
    "max_participants",
    "type",
    "location_text",
    "lat",
    "lng",
)

NON_NULLABLE_FIELDS = ("hobby", "title", "date_time", "max_participants", "type")


# ============================================================================
# Command DTOs
# ============================================================================


class CreateSessionCommand(BaseModel):
    """Validated intent to create a session"""

    hobby: str
    title: str
    description: Optional[str] = None
    date_time: datetime
    max_participants: int
    type: SessionType
    location_text: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class UpdateSessionCommand(BaseModel):
    """
    Partial update - only fields explicitly set are applied.

    Use ``model_fields_set`` / ``exclude_unset`` to tell "absent" from "null".
    Unknown keys are ignored.
    """

    hobby: Optional[str] = Field(default=None, min_length=1, max_length=100)
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    date_time: Optional[datetime] = None
    max_participants: Optional[int] = Field(default=None, gt=0)
    type: Optional[SessionType] = None
    location_text: Optional[str] = Field(default=None, max_length=255)
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        nulled = [
            name
            for name in NON_NULLABLE_FIELDS
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if key in MUTABLE_FIELDS
        }


# ============================================================================
# Response DTOs
# ============================================================================


class SessionResponse(BaseModel):
    """Public projection of a session - never carries its secrets"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    hobby: str
    title: str
    description: Optional[str] = None
    date_time: datetime
    max_participants: int
    type: SessionType
    location_text: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class CreateSessionResponse(BaseModel):
    """The only response that ever returns a session's secrets"""

    id: str
    management_code: str = Field(serialization_alias="managementCode")
    private_url_code: Optional[str] = Field(
        default=None, serialization_alias="privateUrlCode"
    )
    manage_url: str = Field(serialization_alias="manageUrl")
