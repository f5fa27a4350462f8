from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AttendeeCountResponse


class CountAttendeesUseCase:
    """Current occupancy of a session, readable by anyone who knows its id."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: str) -> Result[AttendeeCountResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            count = await self.uow.attendees.count_by_session_id(session_id)
            return Return.ok(
                AttendeeCountResponse(count=count, max=session.max_participants)
            )
