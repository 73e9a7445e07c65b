"""Unit test fixtures with mocked dependencies."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.aggregates import Team
from tenancy.domain.value_objects import TeamId


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )


@pytest.fixture
def make_team():
    """Build Team aggregates with a fresh ID."""

    def _make(code: str = "team-a", name: str = "Team A", **kwargs) -> Team:
        return Team(id=TeamId.generate(), code=code, name=name, **kwargs)

    return _make


@pytest.fixture
def mock_session():
    """Mock AsyncSession whose begin() works as an async context manager."""
    session = Mock(spec=AsyncSession)

    ctx_manager = AsyncMock()
    ctx_manager.__aenter__ = AsyncMock(return_value=None)
    ctx_manager.__aexit__ = AsyncMock(return_value=None)

    session.begin = Mock(return_value=ctx_manager)
    return session
