from typing import List, Optional

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session, SessionType


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: str) -> Optional[Session]:
        """Get session by ID"""
        stmt = select(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_private_url_code(self, code: str) -> Optional[Session]:
        """Get session by private-url code"""
        stmt = select(Session).where(Session.private_url_code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_public(self) -> List[Session]:
        """Public sessions, latest date_time first"""
        stmt = (
            select(Session)
            .where(Session.type == SessionType.public)
            .order_by(Session.date_time.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_update(self, session_id: str) -> Optional[Session]:
        """
        Lock the session row for the rest of the transaction and return it.

        PostgreSQL takes a row lock through SELECT ... FOR UPDATE. SQLite
        ignores FOR UPDATE, so a no-op UPDATE is issued first: the write
        takes the database RESERVED lock, which is held until commit or
        rollback and serializes concurrent joiners the same way.
        """
        if self.session.get_bind().dialect.name == "sqlite":
            await self.session.execute(
                update(Session)
                .where(Session.id == session_id)
                .values(max_participants=Session.max_participants)
                .execution_options(synchronize_session=False)
            )

        stmt = (
            select(Session)
            .where(Session.id == session_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def delete(self, session_obj: Session) -> None:
        """Delete session"""
        await self.session.delete(session_obj)
        await self.session.flush()
