from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: str) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def get_by_private_url_code(self, code: str) -> Optional[Session]:
        """Get session by its private-url code"""
        pass

    @abstractmethod
    async def list_public(self) -> List[Session]:
        """Public sessions, latest date_time first"""
        pass

    @abstractmethod
    async def get_for_update(self, session_id: str) -> Optional[Session]:
        """
        Get session and hold an exclusive lock on its row until the
        surrounding transaction ends.
        """
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Update existing session"""
        pass

    @abstractmethod
    async def delete(self, session: Session) -> None:
        """Delete session"""
        pass
