"""
Attendee Use Cases

Joining (capacity guarded), counting, listing and the two removal paths.
"""

from .count_attendees_use_case import CountAttendeesUseCase
from .dtos import (
    DISPLAY_NAME_MAX_LENGTH,
    AttendeeCountResponse,
    AttendeeResponse,
    JoinSessionCommand,
    JoinSessionResponse,
)
from .join_session_use_case import JoinSessionUseCase
from .leave_session_use_case import LeaveSessionUseCase
from .list_attendees_use_case import ListAttendeesUseCase
from .remove_attendee_use_case import RemoveAttendeeUseCase

__all__ = [
    "JoinSessionUseCase",
    "CountAttendeesUseCase",
    "ListAttendeesUseCase",
    "LeaveSessionUseCase",
    "RemoveAttendeeUseCase",
    "DISPLAY_NAME_MAX_LENGTH",
    "JoinSessionCommand",
    "JoinSessionResponse",
    "AttendeeCountResponse",
    "AttendeeResponse",
]
