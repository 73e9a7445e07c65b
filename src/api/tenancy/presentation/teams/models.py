"""Pydantic models for team API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.domain.aggregates import Team
from tenancy.domain.subdomain import build_team_url
from tenancy.domain.value_objects import is_reserved_subdomain


class CreateTeamRequest(BaseModel):
    """Request model for creating a team."""

    code: str = Field(
        ...,
        description="Subdomain label of the team (lowercase letters, digits, hyphens)",
        min_length=2,
        max_length=20,
        pattern=r"^[a-z0-9-]+$",
    )
    name: str = Field(..., description="Team name", min_length=1, max_length=100)
    description: str | None = Field(
        default=None, description="Team description", max_length=500
    )
    logo_url: str | None = Field(default=None, description="Logo URL", max_length=500)

    @field_validator("code")
    @classmethod
    def code_not_reserved(cls, value: str) -> str:
        """Reject codes that collide with reserved subdomains."""
        if is_reserved_subdomain(value):
            raise ValueError(f"'{value}' is a reserved subdomain")
        return value


class UpdateTeamRequest(BaseModel):
    """Request model for updating a team. Omitted fields are unchanged."""

    name: str | None = Field(
        default=None, description="Team name", min_length=1, max_length=100
    )
    description: str | None = Field(
        default=None, description="Team description", max_length=500
    )
    logo_url: str | None = Field(default=None, description="Logo URL", max_length=500)


class TeamResponse(BaseModel):
    """Response model for team."""

    id: str = Field(..., description="Team ID (ULID format)")
    code: str = Field(..., description="Team code")
    name: str = Field(..., description="Team name")
    description: str | None = Field(default=None, description="Team description")
    logo_url: str | None = Field(default=None, description="Logo URL")
    subdomain_url: str = Field(..., description="Public URL of the team subdomain")

    @classmethod
    def from_domain(cls, team: Team, base_domain: str) -> TeamResponse:
        """Convert domain Team aggregate to API response.

        Args:
            team: Team domain aggregate
            base_domain: Domain under which team subdomains live

        Returns:
            TeamResponse
        """
        return cls(
            id=team.id.value,
            code=team.code,
            name=team.name,
            description=team.description,
            logo_url=team.logo_url,
            subdomain_url=build_team_url(team.code, base_domain),
        )


class AdminTeamResponse(TeamResponse):
    """Team response for the admin API, including deletion state."""

    is_deleted: bool = Field(..., description="Whether the team is soft deleted")
    deleted_at: datetime | None = Field(default=None, description="Deletion time")

    @classmethod
    def from_domain(cls, team: Team, base_domain: str) -> AdminTeamResponse:
        """Convert domain Team aggregate to admin API response."""
        return cls(
            id=team.id.value,
            code=team.code,
            name=team.name,
            description=team.description,
            logo_url=team.logo_url,
            subdomain_url=build_team_url(team.code, base_domain),
            is_deleted=team.is_deleted,
            deleted_at=team.deleted_at,
        )


class TenantContextResponse(BaseModel):
    """Echo of the tenant context bound to the current request."""

    host: str = Field(..., description="Host the request was addressed to")
    outcome: str = Field(..., description="How the tenant context was produced")
    team_code: str | None = Field(default=None, description="Resolved team code")
    team_name: str | None = Field(default=None, description="Resolved team name")
    is_admin_request: bool = Field(..., description="Request to the admin subdomain")
    failure_reason: str | None = Field(
        default=None, description="Why the host did not resolve"
    )

    @classmethod
    def from_context(cls, context: TenantContext) -> TenantContextResponse:
        """Convert a TenantContext to API response."""
        return cls(
            host=context.host,
            outcome=context.outcome.value,
            team_code=context.team_code,
            team_name=context.team.name if context.team is not None else None,
            is_admin_request=context.is_admin_request,
            failure_reason=context.failure_reason,
        )
