import logging
from urllib.parse import quote

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import (
    MANAGEMENT_CODE_LENGTH,
    PRIVATE_URL_CODE_LENGTH,
    SESSION_ID_LENGTH,
    generate_token,
)
from src.domain.entities import Session, SessionType

from .dtos import CreateSessionCommand, CreateSessionResponse

logger = logging.getLogger(__name__)

DEFAULT_MANAGE_URL_PATH = "/session/{id}/manage"


class CreateSessionUseCase:
    """
    Create Session Use Case

    Business Logic:
    1. Mint session id and management code
    2. Mint a private-url code only for private sessions
    3. Persist the session
    4. Return the secrets - this is the only time they leave the service
    """

    def __init__(self, uow: UnitOfWork, manage_url_path: str = DEFAULT_MANAGE_URL_PATH):
        self.uow = uow
        self.manage_url_path = manage_url_path

    async def execute(self, command: CreateSessionCommand) -> Result[CreateSessionResponse]:
        async with self.uow:
            management_code = generate_token(MANAGEMENT_CODE_LENGTH)
            private_url_code = (
                generate_token(PRIVATE_URL_CODE_LENGTH)
                if command.type == SessionType.private
                else None
            )

            session = Session(
                id=generate_token(SESSION_ID_LENGTH),
                hobby=command.hobby,
                title=command.title,
                description=command.description,
                date_time=command.date_time,
                max_participants=command.max_participants,
                type=command.type,
                location_text=command.location_text,
                lat=command.lat,
                lng=command.lng,
                management_code=management_code,
                private_url_code=private_url_code,
            )
            session = await self.uow.sessions.create(session)

            await self.uow.commit()

            logger.info(f"Session {session.id} created ({command.type.value})")

            manage_url = (
                self.manage_url_path.format(id=quote(session.id, safe=""))
                + f"?code={quote(management_code, safe='')}"
            )

            return Return.ok(
                CreateSessionResponse(
                    id=session.id,
                    management_code=management_code,
                    private_url_code=private_url_code,
                    manage_url=manage_url,
                )
            )
