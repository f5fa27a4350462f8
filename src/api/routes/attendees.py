from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.attendees import (
    AttendeeCountResponse,
    AttendeeResponse,
    CountAttendeesUseCase,
    JoinSessionCommand,
    JoinSessionResponse,
    JoinSessionUseCase,
    LeaveSessionUseCase,
    ListAttendeesUseCase,
    RemoveAttendeeUseCase,
)
from src.depends import get_unit_of_work
from src.libs.result import Error

router = APIRouter(prefix="/sessions", tags=["Attendees"])


class JoinSessionRequest(BaseModel):
    """Join payload; the whole body is optional"""

    display_name: Optional[str] = Field(default=None, description="Shown to others")


@router.post(
    "/{session_id}/attendees",
    status_code=status.HTTP_201_CREATED,
    response_model=JoinSessionResponse,
)
async def join_session(
    session_id: str,
    request: Optional[JoinSessionRequest] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Join Session (capacity guarded)

    The attendance code in the response is the only proof of this seat;
    the client keeps it for self-leave.

    Raises:
        - 404 Not Found: Session not found
        - 409 Conflict: Session is full
        - 503 Service Unavailable: Session lock not acquired in time (retry)
    """
    command = JoinSessionCommand(
        display_name=request.display_name if request is not None else None
    )

    use_case = JoinSessionUseCase(uow)
    result = await use_case.execute(session_id, command)

    if result.is_err():
        error = result.error
        if error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "SESSION_FULL":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get(
    "/{session_id}/attendees/count",
    status_code=status.HTTP_200_OK,
    response_model=AttendeeCountResponse,
)
async def count_attendees(session_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Attendee Count

    Raises:
        - 404 Not Found: Session not found
    """
    use_case = CountAttendeesUseCase(uow)
    result = await use_case.execute(session_id)

    if result.is_err():
        error = result.error
        if error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/{session_id}/attendees",
    status_code=status.HTTP_200_OK,
    response_model=List[AttendeeResponse],
)
async def list_attendees(
    session_id: str,
    manage: Optional[str] = Query(None, description="Management code (private sessions)"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Attendees

    Join order. Open for public sessions, owner-only for private ones.

    Raises:
        - 403 Forbidden: Private session without a valid manage code
        - 404 Not Found: Session not found
    """
    use_case = ListAttendeesUseCase(uow)
    result = await use_case.execute(session_id, manage)

    if result.is_err():
        error = result.error
        if error.code == "MANAGE_CODE_REQUIRED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "SESSION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/{session_id}/attendees/{attendee_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def remove_attendee(
    session_id: str,
    attendee_id: str,
    attendance: Optional[str] = Query(None, description="Attendance code (self-leave)"),
    manage: Optional[str] = Query(None, description="Management code (owner removal)"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Attendee

    - ?attendance=CODE: the attendee leaves. Unknown attendee and wrong
      code both answer 404, so the code cannot be probed.
    - ?manage=CODE: the session owner removes the attendee.

    If both are given, the attendance code is used.

    Raises:
        - 400 Bad Request: Neither code given
        - 403 Forbidden: Manage code does not match
        - 404 Not Found: Session/attendee not found, or attendance code mismatch
    """
    if attendance:
        result = await LeaveSessionUseCase(uow).execute(session_id, attendee_id, attendance)
        if result.is_err():
            error = result.error
            if error.code in ("ATTENDEE_NOT_FOUND", "ATTENDANCE_CODE_MISMATCH"):
                raise ClientError(
                    Error("ATTENDEE_NOT_FOUND", "Not found or code mismatch"),
                    status_code=status.HTTP_404_NOT_FOUND,
                )
            raise ServerError(error)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    if manage:
        result = await RemoveAttendeeUseCase(uow).execute(session_id, attendee_id, manage)
        if result.is_err():
            error = result.error
            if error.code == "MISSING_MANAGE_CODE":
                raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
            elif error.code == "INVALID_MANAGE_CODE":
                raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
            elif error.code in ("SESSION_NOT_FOUND", "ATTENDEE_NOT_FOUND"):
                raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
            raise ServerError(error)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    raise ClientError(
        Error("MISSING_CODE", "Provide attendance=CODE or manage=CODE"),
        status_code=status.HTTP_400_BAD_REQUEST,
    )
