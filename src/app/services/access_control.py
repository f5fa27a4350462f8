"""
Access Control

Possession-based authorization. A management code proves control of a
session, an attendance code proves control of one attendee. The two are
never interchangeable.
"""

import secrets
from typing import Optional

from src.libs.result import Error
from src.domain.entities import Attendee, Session, SessionType


def codes_match(presented: Optional[str], stored: Optional[str]) -> bool:
    """Exact, case-sensitive comparison in constant time."""
    if not presented or not stored:
        return False
    return secrets.compare_digest(presented.encode("utf-8"), stored.encode("utf-8"))


def missing_management_code(presented: Optional[str]) -> Optional[Error]:
    if not presented:
        return Error("MISSING_MANAGE_CODE", "Missing manage code")
    return None


def authorize_management(session: Session, presented: Optional[str]) -> Optional[Error]:
    """None when `presented` is the session's management code."""
    if not codes_match(presented, session.management_code):
        return Error("INVALID_MANAGE_CODE", "Invalid manage code")
    return None


def authorize_attendance(attendee: Attendee, presented: Optional[str]) -> Optional[Error]:
    """None when `presented` is the attendee's own attendance code."""
    if not codes_match(presented, attendee.attendance_code):
        return Error("ATTENDANCE_CODE_MISMATCH", "Not found or code mismatch")
    return None


def authorize_attendee_listing(session: Session, presented: Optional[str]) -> Optional[Error]:
    """Public attendee lists are open; private ones need the management code."""
    if session.type == SessionType.public:
        return None
    if not codes_match(presented, session.management_code):
        return Error(
            "MANAGE_CODE_REQUIRED",
            "Manage code required for private session attendees",
        )
    return None
