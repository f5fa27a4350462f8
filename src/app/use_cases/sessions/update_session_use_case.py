"""
Update Session Use Case

Owner-only partial update of a session.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from src.libs.result import Error, Result, Return
from src.app.services.access_control import authorize_management, missing_management_code
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import PRIVATE_URL_CODE_LENGTH, generate_token
from src.domain.entities import SessionType

from .dtos import SessionResponse, UpdateSessionCommand


def _validation_error(exc: ValidationError) -> Error:
    fields = [".".join(str(part) for part in err["loc"]) or err["msg"] for err in exc.errors()]
    return Error("VALIDATION_ERROR", f"Missing or invalid fields: {', '.join(fields)}")


class UpdateSessionUseCase:
    """
    Business Rules:
    - A management code must be presented (MISSING_MANAGE_CODE)
    - The session must exist (SESSION_NOT_FOUND)
    - The code must match the stored one exactly (INVALID_MANAGE_CODE)
    - Only then is the payload validated (VALIDATION_ERROR), so a caller
      without the code learns nothing from field errors
    - Only whitelisted fields present in the payload are applied
    - A payload with no recognized field is rejected (NO_FIELDS_TO_UPDATE)
    - Lowering max_participants never evicts existing attendees
    - Switching to public drops the private-url code; switching to private
      mints one
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        session_id: str,
        management_code: Optional[str],
        payload: Dict[str, Any],
    ) -> Result[SessionResponse]:
        error = missing_management_code(management_code)
        if error:
            return Return.err(error)

        async with self.uow:
            # Locked so a concurrent join sees either the old or new capacity
            session = await self.uow.sessions.get_for_update(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            error = authorize_management(session, management_code)
            if error:
                return Return.err(error)

            try:
                command = UpdateSessionCommand.model_validate(payload)
            except ValidationError as exc:
                return Return.err(_validation_error(exc))

            changes = command.changes()
            if not changes:
                return Return.err(
                    Error("NO_FIELDS_TO_UPDATE", "No valid fields to update")
                )

            for field, value in changes.items():
                setattr(session, field, value)

            if session.type == SessionType.public:
                session.private_url_code = None
            elif session.private_url_code is None:
                session.private_url_code = generate_token(PRIVATE_URL_CODE_LENGTH)

            session = await self.uow.sessions.update(session)
            await self.uow.commit()

            return Return.ok(SessionResponse.model_validate(session))
