"""HTTP routes for teams.

Public routes are served on team subdomains and the bare domain; admin
routes live under ``/v1/admin/`` and skip tenant resolution.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from infrastructure.settings import TenancySettings, get_tenancy_settings
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.services import TeamService
from tenancy.dependencies.team import get_team_service
from tenancy.dependencies.tenant_context import get_tenant_context, require_team
from tenancy.domain.aggregates import Team
from tenancy.domain.subdomain import resolve_team_code
from tenancy.domain.value_objects import TeamId
from tenancy.presentation.host import extract_host_from_scope
from tenancy.presentation.teams.models import (
    AdminTeamResponse,
    CreateTeamRequest,
    TeamResponse,
    TenantContextResponse,
    UpdateTeamRequest,
)

public_router = APIRouter(
    prefix="/v1",
    tags=["teams"],
)

admin_router = APIRouter(
    prefix="/v1/admin/teams",
    tags=["admin"],
)


@public_router.get("/teams")
async def list_teams(
    service: Annotated[TeamService, Depends(get_team_service)],
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> list[TeamResponse]:
    """List all active teams.

    Exempt from tenant resolution, so it answers on any host.
    """
    teams = await service.list_teams()
    return [TeamResponse.from_domain(team, settings.base_domain) for team in teams]


@public_router.get("/teams/code/{code}")
async def get_team_by_code(
    code: str,
    service: Annotated[TeamService, Depends(get_team_service)],
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> TeamResponse:
    """Get an active team by its code.

    Raises:
        TeamNotFoundError: 404 if no active team has this code
    """
    team = await service.get_team_by_code(code)
    return TeamResponse.from_domain(team, settings.base_domain)


@public_router.get("/team/info")
async def get_current_team(
    request: Request,
    service: Annotated[TeamService, Depends(get_team_service)],
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> TeamResponse:
    """Get the team owning the subdomain this request was sent to.

    Resolves the host itself rather than reading the bound context, so an
    unresolvable host is reported instead of silently ignored.

    Raises:
        InvalidSubdomainError: 400 if the host is not a team subdomain
        TeamNotFoundError: 404 if no active team owns the subdomain
    """
    team_code = resolve_team_code(extract_host_from_scope(request.scope))
    team = await service.get_team_by_code(team_code.value)
    return TeamResponse.from_domain(team, settings.base_domain)


@public_router.get("/team")
async def get_bound_team(
    team: Annotated[Team, Depends(require_team)],
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> TeamResponse:
    """Get the team bound to this request by the tenancy middleware.

    Served from the bound context, so it costs no extra lookup.

    Raises:
        InvalidSubdomainError: 400 if the host is not a team subdomain
        TeamNotFoundError: 404 if no active team owns the subdomain
    """
    return TeamResponse.from_domain(team, settings.base_domain)


@public_router.get("/team/context")
async def get_current_tenant_context(
    context: Annotated[TenantContext, Depends(get_tenant_context)],
) -> TenantContextResponse:
    """Echo the tenant context bound to this request."""
    return TenantContextResponse.from_context(context)


@admin_router.get("")
async def admin_list_teams(
    service: Annotated[TeamService, Depends(get_team_service)],
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> list[AdminTeamResponse]:
    """List all active teams for administration."""
    teams = await service.list_teams()
    return [AdminTeamResponse.from_domain(t, settings.base_domain) for t in teams]


@admin_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def create_team(
    request: CreateTeamRequest,
    service: Annotated[TeamService, Depends(get_team_service)],
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> AdminTeamResponse:
    """Create a new team.

    Args:
        request: Team creation request
        service: Team service for orchestration
        settings: Tenancy settings for the subdomain URL

    Returns:
        AdminTeamResponse with created team details

    Raises:
        DuplicateTeamCodeError: 409 if the code is already taken
    """
    team = await service.create_team(
        code=request.code,
        name=request.name,
        description=request.description,
        logo_url=request.logo_url,
    )
    return AdminTeamResponse.from_domain(team, settings.base_domain)


@admin_router.put("/{team_id}")
async def update_team(
    team_id: str,
    request: UpdateTeamRequest,
    service: Annotated[TeamService, Depends(get_team_service)],
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> AdminTeamResponse:
    """Update a team's profile.

    Raises:
        HTTPException: 400 if team ID is invalid
        TeamNotFoundError: 404 if no active team has this ID
    """
    team = await service.update_team(
        _parse_team_id(team_id),
        name=request.name,
        description=request.description,
        logo_url=request.logo_url,
    )
    return AdminTeamResponse.from_domain(team, settings.base_domain)


@admin_router.delete(
    "/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_team(
    team_id: str,
    service: Annotated[TeamService, Depends(get_team_service)],
) -> None:
    """Soft delete a team. Its subdomain stops resolving immediately.

    Raises:
        HTTPException: 400 if team ID is invalid
        TeamNotFoundError: 404 if no active team has this ID
    """
    await service.delete_team(_parse_team_id(team_id))


def _parse_team_id(team_id: str) -> TeamId:
    try:
        return TeamId.from_string(team_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid team ID format: {e}",
        ) from e
