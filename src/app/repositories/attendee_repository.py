from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Attendee


class IAttendeeRepository(ABC):
    """Attendee repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: str, attendee_id: str) -> Optional[Attendee]:
        """Get attendee of a session by ID"""
        pass

    @abstractmethod
    async def list_by_session_id(self, session_id: str) -> List[Attendee]:
        """Attendees of a session in join order"""
        pass

    @abstractmethod
    async def count_by_session_id(self, session_id: str) -> int:
        """Number of attendees in a session"""
        pass

    @abstractmethod
    async def create(self, attendee: Attendee) -> Attendee:
        """Create a new attendee"""
        pass

    @abstractmethod
    async def delete_by_id(self, session_id: str, attendee_id: str) -> bool:
        """Delete one attendee. Returns True if a row was removed."""
        pass

    @abstractmethod
    async def delete_by_session_id(self, session_id: str) -> int:
        """Delete all attendees of a session. Returns count removed."""
        pass
