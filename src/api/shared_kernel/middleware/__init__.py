"""Shared middleware value objects for cross-cutting concerns.

The tenant context is the primary component: it is produced once per request
by the tenancy bounded context and consumed by route handlers of every
other context through dependency injection.
"""

from shared_kernel.middleware.tenant_context import (
    TENANT_CONTEXT_STATE_KEY,
    TenantContext,
    TenantRecord,
    TenantResolutionOutcome,
)

__all__ = [
    "TENANT_CONTEXT_STATE_KEY",
    "TenantContext",
    "TenantRecord",
    "TenantResolutionOutcome",
]
