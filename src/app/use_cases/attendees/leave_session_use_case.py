"""
Leave Session Use Case

Self-service removal: an attendee presents its own attendance code.
"""

import logging

from src.libs.result import Error, Result, Return
from src.app.services.access_control import authorize_attendance
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class LeaveSessionUseCase:
    """
    Business Rules:
    - Only the attendance code of that attendee authorizes the leave;
      a management code is never accepted here
    - Unknown attendee -> ATTENDEE_NOT_FOUND
    - Wrong code -> ATTENDANCE_CODE_MISMATCH
    - A second leave with the same code finds nothing -> ATTENDEE_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_id: str, attendee_id: str, attendance_code: str
    ) -> Result[None]:
        async with self.uow:
            attendee = await self.uow.attendees.get_by_id(session_id, attendee_id)
            if attendee is None:
                return Return.err(Error("ATTENDEE_NOT_FOUND", "Attendee not found"))

            error = authorize_attendance(attendee, attendance_code)
            if error:
                return Return.err(error)

            # A concurrent leave may have removed the row since the read
            deleted = await self.uow.attendees.delete_by_id(session_id, attendee_id)
            if not deleted:
                return Return.err(Error("ATTENDEE_NOT_FOUND", "Attendee not found"))

            await self.uow.commit()

            logger.info(f"Attendee {attendee_id} left session {session_id}")

            return Return.ok(None)
