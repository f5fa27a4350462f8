from typing import List, Optional

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.attendee_repository import IAttendeeRepository
from src.domain.entities import Attendee


class AttendeeRepository(IAttendeeRepository):
    """Attendee repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: str, attendee_id: str) -> Optional[Attendee]:
        """Get attendee of a session by ID"""
        stmt = select(Attendee).where(
            Attendee.id == attendee_id, Attendee.session_id == session_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_session_id(self, session_id: str) -> List[Attendee]:
        """Attendees of a session, earliest join first"""
        stmt = (
            select(Attendee)
            .where(Attendee.session_id == session_id)
            .order_by(Attendee.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_session_id(self, session_id: str) -> int:
        """Number of attendees in a session"""
        stmt = select(func.count()).select_from(Attendee).where(
            Attendee.session_id == session_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, attendee: Attendee) -> Attendee:
        """Create a new attendee"""
        self.session.add(attendee)
        await self.session.flush()
        await self.session.refresh(attendee)
        return attendee

    async def delete_by_id(self, session_id: str, attendee_id: str) -> bool:
        """Delete one attendee of a session"""
        stmt = delete(Attendee).where(
            Attendee.id == attendee_id, Attendee.session_id == session_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_session_id(self, session_id: str) -> int:
        """Delete all attendees of a session"""
        stmt = delete(Attendee).where(Attendee.session_id == session_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
