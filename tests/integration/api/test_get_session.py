from datetime import datetime, timezone

import pytest
from httpx import AsyncClient

from tests.utils.json_compare import assert_no_secrets, without_keys


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.mark.asyncio
async def test_round_trip_by_id(client: AsyncClient, test_data, create_session):
    payload = test_data.get("public_session")
    created = await create_session("public_session")

    response = await client.get(f"/api/sessions/{created['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == created["id"]
    assert_no_secrets(data)

    # date_time is normalized to UTC: 18:30+02:00 -> 16:30Z
    assert _parse(data["date_time"]) == datetime(2030, 5, 1, 16, 30, tzinfo=timezone.utc)
    assert without_keys(data, {"id", "date_time"}) == without_keys(payload, {"date_time"})


@pytest.mark.asyncio
async def test_get_unknown_session(client: AsyncClient):
    response = await client.get("/api/sessions/doesnotexist")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SESSION_NOT_FOUND"


@pytest.mark.asyncio
async def test_private_session_visibility(client: AsyncClient, create_session):
    created = await create_session("private_session")

    by_id = await client.get(f"/api/sessions/{created['id']}")
    assert by_id.status_code == 200
    assert by_id.json()["type"] == "private"

    listed = (await client.get("/api/sessions")).json()
    assert created["id"] not in [s["id"] for s in listed]

    by_code = await client.get(f"/api/sessions/code/{created['privateUrlCode']}")
    assert by_code.status_code == 200
    assert by_code.json()["id"] == created["id"]
    assert_no_secrets(by_code.json())


@pytest.mark.asyncio
async def test_unknown_private_url_code(client: AsyncClient, create_session):
    await create_session("private_session")

    response = await client.get("/api/sessions/code/not-a-code")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_management_code_is_not_a_discovery_key(client: AsyncClient, create_session):
    created = await create_session("private_session")

    response = await client.get(f"/api/sessions/code/{created['managementCode']}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_public_sessions_newest_date_first(client: AsyncClient, create_session):
    early = await create_session("minimal_session", date_time="2030-01-01T10:00:00Z")
    late = await create_session("minimal_session", date_time="2031-01-01T10:00:00Z")
    middle = await create_session("minimal_session", date_time="2030-06-01T10:00:00Z")

    response = await client.get("/api/sessions")

    assert response.status_code == 200
    sessions = response.json()
    assert [s["id"] for s in sessions] == [late["id"], middle["id"], early["id"]]
    for session in sessions:
        assert_no_secrets(session)
