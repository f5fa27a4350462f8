import re

from src.app.services.access_control import (
    authorize_attendance,
    authorize_attendee_listing,
    authorize_management,
    codes_match,
    missing_management_code,
)
from src.domain.base import ensure_utc, generate_token
from src.domain.entities import SessionType
from tests.unit.factories import make_attendee, make_session


def test_generate_token_length_and_alphabet():
    for length in (10, 12, 32):
        token = generate_token(length)
        assert len(token) == length
        assert re.fullmatch(r"[A-Za-z0-9_-]+", token)


def test_generate_token_is_not_repeated():
    tokens = {generate_token(12) for _ in range(1000)}
    assert len(tokens) == 1000


def test_ensure_utc_treats_naive_as_utc_and_converts_aware():
    from datetime import datetime, timedelta, timezone

    naive = datetime(2030, 1, 1, 12, 0)
    assert ensure_utc(naive) == datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)

    berlin = datetime(2030, 1, 1, 13, 0, tzinfo=timezone(timedelta(hours=1)))
    converted = ensure_utc(berlin)
    assert converted.utcoffset() == timedelta(0)
    assert converted.hour == 12


def test_codes_match_is_exact():
    assert codes_match("AbC-123", "AbC-123")
    assert not codes_match("abc-123", "AbC-123")
    assert not codes_match("AbC-12", "AbC-123")
    assert not codes_match("", "AbC-123")
    assert not codes_match(None, "AbC-123")
    assert not codes_match("AbC-123", None)


def test_missing_management_code():
    assert missing_management_code(None).code == "MISSING_MANAGE_CODE"
    assert missing_management_code("").code == "MISSING_MANAGE_CODE"
    assert missing_management_code("x") is None


def test_authorize_management():
    session = make_session(management_code="owner-secret")
    assert authorize_management(session, "owner-secret") is None
    assert authorize_management(session, "OWNER-SECRET").code == "INVALID_MANAGE_CODE"


def test_attendance_and_management_codes_are_not_interchangeable():
    session = make_session(management_code="owner-secret")
    attendee = make_attendee(attendance_code="seat-secret")

    assert authorize_attendance(attendee, "owner-secret").code == "ATTENDANCE_CODE_MISMATCH"
    assert authorize_management(session, "seat-secret").code == "INVALID_MANAGE_CODE"


def test_attendee_listing_visibility():
    public = make_session(type=SessionType.public, management_code="owner-secret")
    private = make_session(type=SessionType.private, management_code="owner-secret")

    assert authorize_attendee_listing(public, None) is None
    assert authorize_attendee_listing(private, None).code == "MANAGE_CODE_REQUIRED"
    assert authorize_attendee_listing(private, "wrong").code == "MANAGE_CODE_REQUIRED"
    assert authorize_attendee_listing(private, "owner-secret") is None
