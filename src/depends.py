from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

# Registers the tables on SQLModel.metadata
import src.domain.entities  # noqa: F401


def build_engine(db_uri: str, lock_timeout: float = 5, echo: bool = False) -> AsyncEngine:
    """
    Async engine whose lock waits are bounded by `lock_timeout` seconds.

    SQLite: busy timeout + foreign keys on every connection.
    PostgreSQL (asyncpg): server-side lock_timeout.
    """
    url = make_url(db_uri)
    backend = url.get_backend_name()

    connect_args = {}
    if backend == "sqlite":
        connect_args["timeout"] = lock_timeout
    elif backend == "postgresql" and url.get_driver_name() == "asyncpg":
        connect_args["server_settings"] = {"lock_timeout": str(int(lock_timeout * 1000))}

    engine = create_async_engine(db_uri, echo=echo, future=True, connect_args=connect_args)

    if backend == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


class Database:
    """
    Storage handle: one engine and session factory per process.

    Built by the app factory, disposed at shutdown and handed to requests
    through `get_unit_of_work`.
    """

    def __init__(self, db_uri: str, lock_timeout: float = 5, echo: bool = False):
        self.engine = build_engine(db_uri, lock_timeout=lock_timeout, echo=echo)
        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    @classmethod
    def from_config(cls, config) -> "Database":
        return cls(config.DB_URI, lock_timeout=config.DB_LOCK_TIMEOUT, echo=config.DB_ECHO)

    async def create_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def drop_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

    async def dispose(self):
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_unit_of_work(request: Request) -> AsyncIterator[SqlAlchemyUnitOfWork]:
    # One AsyncSession (one connection, one transaction) per request
    async with get_database(request).session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)
