"""
Attendee Entity

A participant bound to one session.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class Attendee(SQLModel, table=True):
    """
    Attendee entity - one seat in a session.

    Business Rules:
    - attendance_code is handed only to the joining client (self-leave)
    - Removed with its session (ON DELETE CASCADE)
    - created_at orders the attendee list (join order)
    """

    __tablename__ = "attendees"

    id: str = Field(primary_key=True, max_length=20)

    session_id: str = Field(foreign_key="sessions.id", ondelete="CASCADE", max_length=20)
    attendance_code: str = Field(max_length=32)
    display_name: Optional[str] = Field(default=None, max_length=60)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (Index("idx_attendee_session_created", "session_id", "created_at"),)
