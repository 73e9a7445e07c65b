"""Tenant context value object for resolved tenant identification.

This module contains the pure value object that represents the outcome of
request-time tenant resolution. It is framework-agnostic and contains no
business logic, making it safe for the shared kernel.

The actual resolution logic (host extraction, subdomain parsing, team lookup)
lives in the tenancy bounded context.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable

# Attribute name of the context on the request state.
TENANT_CONTEXT_STATE_KEY = "tenant_context"


class TenantResolutionOutcome(StrEnum):
    """How the tenant context of a request was produced.

    ``NO_TENANT`` and ``RESOLUTION_FAILED`` are deliberately separate: the
    first is a well-formed team subdomain nobody owns, the second is a host
    that is not shaped like a team subdomain at all.
    """

    EXEMPT = "exempt"
    RESOLVED = "resolved"
    NO_TENANT = "no_tenant"
    RESOLUTION_FAILED = "resolution_failed"


@runtime_checkable
class TenantRecord(Protocol):
    """Read-only view of a tenant as seen by consumers of the context."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant context for the current request.

    Bound once per request before route handlers run and never mutated
    afterwards.

    Attributes:
        host: The raw host the client addressed (untrusted, may be empty).
        outcome: How the context was produced.
        team_code: Validated team code, if the host resolved to one.
        team: The team owning ``team_code``, if it exists.
        is_admin_request: Whether the host is the administrative subdomain.
        failure_reason: Machine-readable reason when resolution failed.
    """

    host: str
    outcome: TenantResolutionOutcome
    team_code: str | None = None
    team: TenantRecord | None = None
    is_admin_request: bool = False
    failure_reason: str | None = None

    @classmethod
    def exempt(cls, host: str, is_admin_request: bool) -> TenantContext:
        """Context for a request that skipped resolution entirely."""
        return cls(
            host=host,
            outcome=TenantResolutionOutcome.EXEMPT,
            is_admin_request=is_admin_request,
        )

    @classmethod
    def resolution_failed(cls, host: str, reason: str) -> TenantContext:
        """Context for a host that did not parse to a team subdomain."""
        return cls(
            host=host,
            outcome=TenantResolutionOutcome.RESOLUTION_FAILED,
            failure_reason=reason,
        )

    @classmethod
    def no_tenant(cls, host: str, team_code: str) -> TenantContext:
        """Context for a valid team code that no team owns."""
        return cls(
            host=host,
            outcome=TenantResolutionOutcome.NO_TENANT,
            team_code=team_code,
        )

    @classmethod
    def resolved(cls, host: str, team_code: str, team: TenantRecord) -> TenantContext:
        """Context for a host that resolved to an existing team."""
        return cls(
            host=host,
            outcome=TenantResolutionOutcome.RESOLVED,
            team_code=team_code,
            team=team,
        )

    @property
    def has_team(self) -> bool:
        """Whether a team record is bound to this request."""
        return self.team is not None
