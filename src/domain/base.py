import secrets
from datetime import datetime, timezone
from typing import Optional

SESSION_ID_LENGTH = 10
MANAGEMENT_CODE_LENGTH = 12
PRIVATE_URL_CODE_LENGTH = 12
ATTENDEE_ID_LENGTH = 12
ATTENDANCE_CODE_LENGTH = 12


def generate_token(length: int) -> str:
    """Opaque URL-safe token (A-Z, a-z, 0-9, '-', '_') from a CSPRNG."""
    # token_urlsafe(n) yields ~1.3 chars per byte, so n bytes always cover n chars
    return secrets.token_urlsafe(length)[:length]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize to an aware UTC datetime; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
