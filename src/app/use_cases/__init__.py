"""
Use Cases

Organized by domain folder:
- sessions/: listing, reading, creating and managing sessions
- attendees/: joining, counting, listing and removing attendees
"""

from .sessions import (
    CreateSessionUseCase,
    DeleteSessionUseCase,
    GetSessionUseCase,
    ListPublicSessionsUseCase,
    UpdateSessionUseCase,
)
from .attendees import (
    CountAttendeesUseCase,
    JoinSessionUseCase,
    LeaveSessionUseCase,
    ListAttendeesUseCase,
    RemoveAttendeeUseCase,
)

__all__ = [
    # Sessions
    "ListPublicSessionsUseCase",
    "GetSessionUseCase",
    "CreateSessionUseCase",
    "UpdateSessionUseCase",
    "DeleteSessionUseCase",
    # Attendees
    "JoinSessionUseCase",
    "CountAttendeesUseCase",
    "ListAttendeesUseCase",
    "LeaveSessionUseCase",
    "RemoveAttendeeUseCase",
]
