import pytest
from httpx import AsyncClient

from tests.utils.json_compare import assert_no_secrets


@pytest.mark.asyncio
async def test_patch_title_with_management_code(client: AsyncClient, create_session):
    created = await create_session()
    sid, code = created["id"], created["managementCode"]

    response = await client.patch(
        f"/api/sessions/{sid}", params={"manage": code}, json={"title": "New title"}
    )

    assert response.status_code == 200
    assert response.json()["title"] == "New title"
    assert_no_secrets(response.json())

    read = await client.get(f"/api/sessions/{sid}")
    assert read.json()["title"] == "New title"


@pytest.mark.asyncio
async def test_patch_with_wrong_code_is_forbidden_and_changes_nothing(
    client: AsyncClient, create_session
):
    created = await create_session()
    sid = created["id"]
    before = (await client.get(f"/api/sessions/{sid}")).json()

    for _ in range(3):
        response = await client.patch(
            f"/api/sessions/{sid}", params={"manage": "WRONG"}, json={"title": "nope"}
        )
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "INVALID_MANAGE_CODE"

    assert (await client.get(f"/api/sessions/{sid}")).json() == before


@pytest.mark.asyncio
async def test_patch_is_case_sensitive(client: AsyncClient, create_session):
    created = await create_session()
    code = created["managementCode"]
    flipped = code.swapcase()
    if flipped == code:
        pytest.skip("code has no letters")

    response = await client.patch(
        f"/api/sessions/{created['id']}", params={"manage": flipped}, json={"title": "x"}
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_patch_without_code(client: AsyncClient, create_session):
    created = await create_session()

    response = await client.patch(f"/api/sessions/{created['id']}", json={"title": "x"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_MANAGE_CODE"


@pytest.mark.asyncio
async def test_patch_unknown_session(client: AsyncClient):
    response = await client.patch(
        "/api/sessions/missing", params={"manage": "whatever"}, json={"title": "x"}
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_patch_with_no_recognized_fields(client: AsyncClient, create_session):
    created = await create_session()

    response = await client.patch(
        f"/api/sessions/{created['id']}",
        params={"manage": created["managementCode"]},
        json={"management_code": "mine-now", "id": "other"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NO_FIELDS_TO_UPDATE"


@pytest.mark.asyncio
async def test_patch_ignores_non_whitelisted_fields(client: AsyncClient, create_session):
    created = await create_session()
    sid, code = created["id"], created["managementCode"]

    response = await client.patch(
        f"/api/sessions/{sid}",
        params={"manage": code},
        json={"title": "Renamed", "management_code": "mine-now"},
    )
    assert response.status_code == 200

    # The old code still works, the injected one does not
    ok = await client.patch(f"/api/sessions/{sid}", params={"manage": code}, json={"hobby": "Go"})
    hijack = await client.patch(
        f"/api/sessions/{sid}", params={"manage": "mine-now"}, json={"hobby": "Go"}
    )
    assert ok.status_code == 200
    assert hijack.status_code == 403


@pytest.mark.asyncio
async def test_patch_rejects_null_for_required_field(client: AsyncClient, create_session):
    created = await create_session()

    response = await client.patch(
        f"/api/sessions/{created['id']}",
        params={"manage": created["managementCode"]},
        json={"title": None},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_patch_can_clear_optional_fields(client: AsyncClient, create_session):
    created = await create_session()

    response = await client.patch(
        f"/api/sessions/{created['id']}",
        params={"manage": created["managementCode"]},
        json={"description": None, "location_text": None},
    )

    assert response.status_code == 200
    assert response.json()["description"] is None
    assert response.json()["location_text"] is None


@pytest.mark.asyncio
async def test_patch_invalid_body_with_wrong_code_is_forbidden(
    client: AsyncClient, create_session
):
    created = await create_session()

    response = await client.patch(
        f"/api/sessions/{created['id']}",
        params={"manage": "WRONG"},
        json={"max_participants": 0},
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INVALID_MANAGE_CODE"


@pytest.mark.asyncio
async def test_patch_invalid_body_for_unknown_session(client: AsyncClient):
    response = await client.patch(
        "/api/sessions/missing", params={"manage": "whatever"}, json={"max_participants": 0}
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SESSION_NOT_FOUND"


@pytest.mark.asyncio
async def test_patch_invalid_body_with_correct_code(client: AsyncClient, create_session):
    created = await create_session()
    sid = created["id"]

    response = await client.patch(
        f"/api/sessions/{sid}",
        params={"manage": created["managementCode"]},
        json={"max_participants": 0},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert (await client.get(f"/api/sessions/{sid}")).json()["max_participants"] == 4


@pytest.mark.asyncio
async def test_making_private_session_public_retires_its_private_url_code(
    client: AsyncClient, create_session
):
    created = await create_session("private_session")
    private_code = created["privateUrlCode"]

    response = await client.patch(
        f"/api/sessions/{created['id']}",
        params={"manage": created["managementCode"]},
        json={"type": "public"},
    )
    assert response.status_code == 200

    assert (await client.get(f"/api/sessions/code/{private_code}")).status_code == 404
    listed = (await client.get("/api/sessions")).json()
    assert created["id"] in [s["id"] for s in listed]
