"""
Delete Session Use Case

Owner-only delete; attendees go with the session.
"""

import logging
from typing import Optional

from src.libs.result import Error, Result, Return
from src.app.services.access_control import authorize_management, missing_management_code
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteSessionUseCase:
    """Deletes the session and its attendees; the result is the number of attendees removed."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_id: str, management_code: Optional[str]
    ) -> Result[int]:
        error = missing_management_code(management_code)
        if error:
            return Return.err(error)

        async with self.uow:
            session = await self.uow.sessions.get_for_update(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            error = authorize_management(session, management_code)
            if error:
                return Return.err(error)

            removed = await self.uow.attendees.delete_by_session_id(session_id)
            await self.uow.sessions.delete(session)

            await self.uow.commit()

            logger.info(f"Session {session_id} deleted with {removed} attendee(s)")

            return Return.ok(removed)
