"""
Remove Attendee Use Case

Owner removes ("kicks") any attendee of the session.
"""

import logging
from typing import Optional

from src.libs.result import Error, Result, Return
from src.app.services.access_control import authorize_management, missing_management_code
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class RemoveAttendeeUseCase:
    """
    Business Rules:
    - Management code required (MISSING_MANAGE_CODE) and must match
      (INVALID_MANAGE_CODE); an attendance code is never accepted here
    - Unknown session -> SESSION_NOT_FOUND, unknown attendee -> ATTENDEE_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_id: str, attendee_id: str, management_code: Optional[str]
    ) -> Result[None]:
        error = missing_management_code(management_code)
        if error:
            return Return.err(error)

        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            error = authorize_management(session, management_code)
            if error:
                return Return.err(error)

            deleted = await self.uow.attendees.delete_by_id(session_id, attendee_id)
            if not deleted:
                return Return.err(Error("ATTENDEE_NOT_FOUND", "Attendee not found"))

            await self.uow.commit()

            logger.info(f"Attendee {attendee_id} removed from session {session_id} by owner")

            return Return.ok(None)
