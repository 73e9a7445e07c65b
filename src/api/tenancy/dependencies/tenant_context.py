"""Tenant context FastAPI dependencies.

The binding middleware stores one TenantContext per request on the
request state. Route handlers receive it as a typed parameter:

    @router.get("/example")
    async def example(
        tenant: Annotated[TenantContext, Depends(get_tenant_context)],
    ):
        # tenant.team is the resolved team, or None
        ...

Handlers that cannot work without a team use ``require_team`` instead,
which turns an absent team into the matching HTTP error.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from shared_kernel.middleware.tenant_context import (
    TENANT_CONTEXT_STATE_KEY,
    TenantContext,
    TenantResolutionOutcome,
    TenantRecord,
)
from tenancy.domain.exceptions import (
    InvalidSubdomainError,
    SubdomainRejection,
    TeamNotFoundError,
)


def get_tenant_context(request: Request) -> TenantContext:
    """Return the TenantContext bound to the current request.

    Raises:
        RuntimeError: If the binding middleware is not installed
    """
    context = getattr(request.state, TENANT_CONTEXT_STATE_KEY, None)
    if context is None:
        raise RuntimeError(
            "Tenant context not bound. Ensure TenantBindingMiddleware is installed."
        )
    return context


def require_team(
    context: Annotated[TenantContext, Depends(get_tenant_context)],
) -> TenantRecord:
    """Return the team of the current request.

    Raises:
        InvalidSubdomainError: If the host is not a team subdomain (400)
        TeamNotFoundError: If the subdomain names no active team (404)
    """
    if context.has_team:
        return context.team

    if context.outcome is TenantResolutionOutcome.NO_TENANT and context.team_code:
        raise TeamNotFoundError(context.team_code)

    raise InvalidSubdomainError(
        context.host,
        context.failure_reason or SubdomainRejection.NOT_RESOLVED,
    )
