import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.api.app import create_app
from src.depends import Database
from tests.fixtures.payloads import SessionPayloads


@pytest_asyncio.fixture
def test_data():
    return SessionPayloads


@pytest_asyncio.fixture
async def database(tmp_path):
    # File-backed so that concurrent requests use separate connections
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", lock_timeout=30)
    await database.create_all()
    yield database
    await database.drop_all()
    await database.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(database):
    app = create_app(ApplicationConfig, database=database)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def create_session(client, test_data):
    """Factory: POST a session from test_data (with overrides), return its JSON"""

    async def _create(key: str = "public_session", **overrides) -> dict:
        payload = test_data.get(key, **overrides)
        response = await client.post("/api/sessions", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
