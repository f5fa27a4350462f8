"""
Session Use Cases

Listing, reading, creating and owner management of sessions.
"""

from .create_session_use_case import CreateSessionUseCase
from .delete_session_use_case import DeleteSessionUseCase
from .dtos import (
    MUTABLE_FIELDS,
    CreateSessionCommand,
    CreateSessionResponse,
    SessionResponse,
    UpdateSessionCommand,
)
from .get_session_use_case import GetSessionUseCase
from .list_public_sessions_use_case import ListPublicSessionsUseCase
from .update_session_use_case import UpdateSessionUseCase

__all__ = [
    "ListPublicSessionsUseCase",
    "GetSessionUseCase",
    "CreateSessionUseCase",
    "UpdateSessionUseCase",
    "DeleteSessionUseCase",
    "MUTABLE_FIELDS",
    "CreateSessionCommand",
    "CreateSessionResponse",
    "UpdateSessionCommand",
    "SessionResponse",
]
