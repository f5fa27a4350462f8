"""
Join Session Use Case

The capacity guard. Lock, count and insert run in one transaction under a
lock on the session row, so concurrent joiners of one session are
serialized while joiners of different sessions are not.
"""

import logging

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import ATTENDANCE_CODE_LENGTH, ATTENDEE_ID_LENGTH, generate_token
from src.domain.entities import Attendee

from .dtos import JoinSessionCommand, JoinSessionResponse

logger = logging.getLogger(__name__)


class JoinSessionUseCase:
    """
    Business Logic:
    1. Lock the session row (held until commit/rollback)
    2. Count current attendees
    3. count >= max_participants -> SESSION_FULL, nothing inserted
    4. Otherwise mint attendee id + attendance code, insert, commit

    The lock must cover both the count and the insert; releasing it in
    between reopens the check-then-act race.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_id: str, command: JoinSessionCommand
    ) -> Result[JoinSessionResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_for_update(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            # Rollback expires the ORM instance, read what we need up front
            capacity = session.max_participants

            current = await self.uow.attendees.count_by_session_id(session_id)
            if current >= capacity:
                await self.uow.rollback()
                logger.info(
                    f"Join rejected for session {session_id} - at capacity "
                    f"({current}/{capacity})"
                )
                return Return.err(Error("SESSION_FULL", "Session is full"))

            attendee = Attendee(
                id=generate_token(ATTENDEE_ID_LENGTH),
                session_id=session_id,
                attendance_code=generate_token(ATTENDANCE_CODE_LENGTH),
                display_name=command.display_name,
            )
            attendee = await self.uow.attendees.create(attendee)

            await self.uow.commit()

            logger.info(
                f"Attendee {attendee.id} joined session {session_id} "
                f"({current + 1}/{capacity})"
            )

            return Return.ok(
                JoinSessionResponse(
                    attendee_id=attendee.id,
                    attendance_code=attendee.attendance_code,
                )
            )
