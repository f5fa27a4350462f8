import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock()
    uow.sessions.get_by_private_url_code = AsyncMock()
    uow.sessions.list_public = AsyncMock()
    uow.sessions.get_for_update = AsyncMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.update = AsyncMock(side_effect=lambda session: session)
    uow.sessions.delete = AsyncMock()

    uow.attendees = MagicMock()
    uow.attendees.get_by_id = AsyncMock()
    uow.attendees.list_by_session_id = AsyncMock()
    uow.attendees.count_by_session_id = AsyncMock()
    uow.attendees.create = AsyncMock(side_effect=lambda attendee: attendee)
    uow.attendees.delete_by_id = AsyncMock()
    uow.attendees.delete_by_session_id = AsyncMock()

    return uow
