"""
Session Entity

A plannable hobby meetup with a capacity limit.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import CheckConstraint, Column, DateTime, Field, Index, SQLModel, Text

from src.domain.base import utc_now

from .enums import SessionType


class Session(SQLModel, table=True):
    """
    Session entity - a hobby meetup owned through its management code.

    Business Rules:
    - management_code is minted once at creation and never re-issued
    - private_url_code exists only for sessions created as private
    - Public sessions are listable; private ones are reachable by id or
      private_url_code only
    - max_participants caps new joins; lowering it never evicts attendees
    """

    __tablename__ = "sessions"

    id: str = Field(primary_key=True, max_length=20)

    hobby: str = Field(max_length=100)
    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    date_time: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    max_participants: int

    type: SessionType = Field(default=SessionType.public)

    location_text: Optional[str] = Field(default=None, max_length=255)
    lat: Optional[float] = Field(default=None)
    lng: Optional[float] = Field(default=None)

    # Bearer secrets
    management_code: str = Field(max_length=32)
    private_url_code: Optional[str] = Field(default=None, max_length=32, unique=True)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (
        Index("idx_session_type_date_time", "type", "date_time"),
        CheckConstraint("max_participants > 0", name="ck_session_max_participants_positive"),
    )
