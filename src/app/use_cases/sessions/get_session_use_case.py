"""
Get Session Use Case

Reads one session either by id or by its private-url code. Both paths
return the same public projection.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import SessionResponse


class GetSessionUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def by_id(self, session_id: str) -> Result[SessionResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))
            return Return.ok(SessionResponse.model_validate(session))

    async def by_private_url_code(self, code: str) -> Result[SessionResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_by_private_url_code(code)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))
            return Return.ok(SessionResponse.model_validate(session))
