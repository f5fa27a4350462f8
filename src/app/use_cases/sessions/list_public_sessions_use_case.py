from typing import List

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import SessionResponse


class ListPublicSessionsUseCase:
    """Lists public sessions, latest date_time first. Private ones never appear."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[SessionResponse]]:
        async with self.uow:
            sessions = await self.uow.sessions.list_public()
            return Return.ok([SessionResponse.model_validate(s) for s in sessions])
