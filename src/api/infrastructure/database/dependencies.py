"""Database session providers.

Engines and sessionmakers are created lazily, once per role, and shared by
the whole process. Route handlers get sessions through the FastAPI
dependencies; code running outside a dependency scope (the tenant binding
middleware) opens one with ``read_session()``.
"""

from __future__ import annotations

import threading
from collections.abc import AsyncGenerator, AsyncIterator, Callable
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_read_engine, create_write_engine
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import DatabaseSettings, get_database_settings

_probe = DefaultConnectionProbe()

_WRITE = "write"
_READ = "read"

_factories: dict[str, Callable[[DatabaseSettings], AsyncEngine]] = {
    _WRITE: create_write_engine,
    _READ: create_read_engine,
}

_engines: dict[str, AsyncEngine] = {}
_sessionmakers: dict[str, async_sessionmaker[AsyncSession]] = {}

_engine_lock = threading.Lock()


def _get_sessionmaker(role: str) -> async_sessionmaker[AsyncSession]:
    # Double-check locking so concurrent first requests create one engine.
    maker = _sessionmakers.get(role)
    if maker is None:
        with _engine_lock:
            maker = _sessionmakers.get(role)
            if maker is None:
                settings = get_database_settings()
                engine = _factories[role](settings)
                maker = async_sessionmaker(
                    engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                )
                _engines[role] = engine
                _sessionmakers[role] = maker
                _probe.engine_created(role, settings.host, settings.database)
    return maker


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a write session for mutations (FastAPI dependency).

    The session does not auto-commit. Callers manage transactions with
    ``async with session.begin()``.

    Yields:
        AsyncSession for database operations
    """
    async with _get_sessionmaker(_WRITE)() as session:
        yield session


@asynccontextmanager
async def read_session() -> AsyncIterator[AsyncSession]:
    """Open a read session outside FastAPI dependency injection."""
    async with _get_sessionmaker(_READ)() as session:
        yield session


async def close_database_connections() -> None:
    """Dispose all engines.

    Called on application shutdown. Engines are recreated on next use.
    """
    with _engine_lock:
        engines = list(_engines.items())
        _engines.clear()
        _sessionmakers.clear()

    for role, engine in engines:
        await engine.dispose()
        _probe.engine_disposed(role)
