"""
List Attendees Use Case

Public sessions expose their attendee list to anyone; private sessions only
to the holder of the management code. Attendance codes are never listed.
"""

from typing import List, Optional

from src.libs.result import Error, Result, Return
from src.app.services.access_control import authorize_attendee_listing
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AttendeeResponse


class ListAttendeesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_id: str, management_code: Optional[str] = None
    ) -> Result[List[AttendeeResponse]]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            error = authorize_attendee_listing(session, management_code)
            if error:
                return Return.err(error)

            attendees = await self.uow.attendees.list_by_session_id(session_id)
            return Return.ok([AttendeeResponse.model_validate(a) for a in attendees])
