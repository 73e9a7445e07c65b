"""Team lookup, binder and service dependencies.

The lookup cache, the lookup itself and the binder are process-wide
singletons: the cache only works if every request shares it, and team
writes must invalidate the same instance the middleware reads from.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session, read_session
from infrastructure.settings import get_tenancy_settings
from tenancy.application.binder import RequestTenantBinder
from tenancy.application.cache import TeamLookupCache
from tenancy.application.exemption import PathExemptionPolicy
from tenancy.application.services import TeamService
from tenancy.application.team_lookup import TeamLookup
from tenancy.infrastructure.team_repository import TeamRepository
from tenancy.ports.repositories import ITeamRepository


@lru_cache
def get_team_lookup_cache() -> TeamLookupCache | None:
    """Get the shared lookup cache, or None when caching is disabled."""
    settings = get_tenancy_settings()
    if not settings.lookup_cache_enabled:
        return None
    return TeamLookupCache(
        max_size=settings.lookup_cache_max_size,
        ttl_seconds=settings.lookup_cache_ttl_seconds,
        negative_ttl_seconds=settings.lookup_cache_negative_ttl_seconds,
    )


@asynccontextmanager
async def open_team_repository() -> AsyncIterator[ITeamRepository]:
    """Open a TeamRepository on a fresh read session."""
    async with read_session() as session:
        yield TeamRepository(session=session)


@lru_cache
def get_team_lookup() -> TeamLookup:
    """Get the shared TeamLookup."""
    return TeamLookup(
        repository_provider=open_team_repository,
        cache=get_team_lookup_cache(),
    )


@lru_cache
def get_path_exemption_policy() -> PathExemptionPolicy:
    """Get the exemption policy built from settings."""
    settings = get_tenancy_settings()
    return PathExemptionPolicy.from_config(
        prefixes=settings.exempt_path_prefixes,
        exact_paths=settings.exempt_paths,
    )


@lru_cache
def get_request_tenant_binder() -> RequestTenantBinder:
    """Get the shared RequestTenantBinder used by the binding middleware."""
    settings = get_tenancy_settings()
    return RequestTenantBinder(
        exemption_policy=get_path_exemption_policy(),
        team_lookup=get_team_lookup(),
        slow_threshold_ms=settings.slow_resolution_threshold_ms,
    )


def get_team_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> TeamRepository:
    """Get TeamRepository instance.

    Args:
        session: Async database session

    Returns:
        TeamRepository bound to the request's write session
    """
    return TeamRepository(session=session)


def get_team_service(
    team_repository: Annotated[TeamRepository, Depends(get_team_repository)],
    session: Annotated[AsyncSession, Depends(get_write_session)],
    team_lookup: Annotated[TeamLookup, Depends(get_team_lookup)],
) -> TeamService:
    """Get TeamService instance.

    Args:
        team_repository: Team repository
        session: Async database session for transaction management
        team_lookup: Shared lookup whose cache follows team writes

    Returns:
        TeamService instance
    """
    return TeamService(
        team_repository=team_repository,
        session=session,
        team_lookup=team_lookup,
    )
