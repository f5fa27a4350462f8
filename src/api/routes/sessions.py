from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions import (
    CreateSessionCommand,
    CreateSessionResponse,
    CreateSessionUseCase,
    DeleteSessionUseCase,
    GetSessionUseCase,
    ListPublicSessionsUseCase,
    SessionResponse,
    UpdateSessionUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import SessionType

router = APIRouter(prefix="/sessions", tags=["Sessions"])


class CreateSessionRequest(BaseModel):
    """
    Create session HTTP request payload

    Validates incoming HTTP request before converting to CreateSessionCommand.
    """

    hobby: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    date_time: datetime = Field(..., description="ISO-8601; normalized to UTC")
    max_participants: int = Field(..., gt=0)
    type: SessionType
    location_text: Optional[str] = Field(default=None, max_length=255)
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[SessionResponse])
async def list_public_sessions(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    List Public Sessions

    Newest date_time first. Private sessions and all secrets are excluded.
    """
    use_case = ListPublicSessionsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/code/{code}", status_code=status.HTTP_200_OK, response_model=SessionResponse
)
async def get_session_by_code(code: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Session by Private-URL Code

    Raises:
        - 404 Not Found: No session carries this code
    """
    use_case = GetSessionUseCase(uow)
    result = await use_case.by_private_url_code(code)

    if result.is_err():
        error = result.error
        if error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/{session_id}", status_code=status.HTTP_200_OK, response_model=SessionResponse
)
async def get_session(session_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Session by ID

    Works for public and private sessions alike.

    Raises:
        - 404 Not Found: Session not found
    """
    use_case = GetSessionUseCase(uow)
    result = await use_case.by_id(session_id)

    if result.is_err():
        error = result.error
        if error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateSessionResponse,
    response_model_exclude_none=True,
)
async def create_session(
    request: CreateSessionRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create Session

    Returns the management code (and the private-url code for private
    sessions) exactly once, together with a relative manage URL.

    Raises:
        - 400 Bad Request: Missing or invalid fields
        - 500 Internal Server Error: Server error
    """
    command = CreateSessionCommand(**request.model_dump())

    use_case = CreateSessionUseCase(uow, manage_url_path=ApplicationConfig.MANAGE_URL_PATH)
    result = await use_case.execute(command)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.patch(
    "/{session_id}", status_code=status.HTTP_200_OK, response_model=SessionResponse
)
async def update_session(
    session_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    manage: Optional[str] = Query(None, description="Management code"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Session (owner)

    The body is validated only after the management code checks out.

    Raises:
        - 400 Bad Request: No manage code, invalid fields, or no recognized field
        - 403 Forbidden: Manage code does not match
        - 404 Not Found: Session not found
    """
    use_case = UpdateSessionUseCase(uow)
    result = await use_case.execute(session_id, manage, payload or {})

    if result.is_err():
        error = result.error
        if error.code in ("MISSING_MANAGE_CODE", "VALIDATION_ERROR", "NO_FIELDS_TO_UPDATE"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID_MANAGE_CODE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    manage: Optional[str] = Query(None, description="Management code"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Session (owner)

    Attendees are deleted with the session.

    Raises:
        - 400 Bad Request: No manage code
        - 403 Forbidden: Manage code does not match
        - 404 Not Found: Session not found
    """
    use_case = DeleteSessionUseCase(uow)
    result = await use_case.execute(session_id, manage)

    if result.is_err():
        error = result.error
        if error.code == "MISSING_MANAGE_CODE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID_MANAGE_CODE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
