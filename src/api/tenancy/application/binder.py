"""Per-request tenant binding.

Runs once for each request before any route handler:

    exempt?  ──yes──▶ TenantContext(outcome=exempt)
       │no
    resolve host ──InvalidSubdomainError──▶ TenantContext(outcome=resolution_failed)
       │TeamCode
    lookup code ──None──▶ TenantContext(outcome=no_tenant)
       │Team
    TenantContext(outcome=resolved)

Resolution problems never reject the request; route handlers decide what
an absent team means for them. Persistence errors from the lookup are not
caught here.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from shared_kernel.middleware.observability import (
    DefaultTenantResolutionProbe,
    TenantResolutionProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.application.exemption import PathExemptionPolicy
from tenancy.application.team_lookup import TeamLookup
from tenancy.domain.exceptions import InvalidSubdomainError
from tenancy.domain.subdomain import is_admin_host, resolve_team_code


class RequestTenantBinder:
    """Produces the TenantContext of a request from its path and host."""

    def __init__(
        self,
        exemption_policy: PathExemptionPolicy,
        team_lookup: TeamLookup,
        probe: TenantResolutionProbe | None = None,
        slow_threshold_ms: float = 100.0,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        """Initialize the binder.

        Args:
            exemption_policy: Decides which requests skip resolution
            team_lookup: Resolves a team code to a team
            probe: Optional domain probe for observability
            slow_threshold_ms: Resolutions slower than this are reported
            clock: Time source in seconds, injectable for tests
        """
        self._exemption_policy = exemption_policy
        self._team_lookup = team_lookup
        self._probe = probe or DefaultTenantResolutionProbe()
        self._slow_threshold_ms = slow_threshold_ms
        self._clock = clock

    async def bind(self, path: str, host: str) -> TenantContext:
        """Compute the tenant context for a request.

        Args:
            path: Request path
            host: Raw host the client addressed

        Returns:
            The immutable TenantContext for the request
        """
        if self._exemption_policy.is_exempt(path, host):
            is_admin_request = is_admin_host(host)
            self._probe.resolution_exempted(host, path, is_admin_request)
            return TenantContext.exempt(host, is_admin_request=is_admin_request)

        started = self._clock()
        try:
            return await self._resolve(path, host)
        finally:
            elapsed_ms = (self._clock() - started) * 1000
            if elapsed_ms > self._slow_threshold_ms:
                self._probe.slow_resolution(host, path, elapsed_ms)

    async def _resolve(self, path: str, host: str) -> TenantContext:
        try:
            team_code = resolve_team_code(host)
        except InvalidSubdomainError as e:
            self._probe.resolution_failed(host, path, e.reason)
            return TenantContext.resolution_failed(host, reason=e.reason)

        team = await self._team_lookup.lookup(team_code)
        if team is None:
            self._probe.tenant_not_found(host, team_code.value)
            return TenantContext.no_tenant(host, team_code=team_code.value)

        self._probe.tenant_resolved(host, team_code.value)
        return TenantContext.resolved(host, team_code=team_code.value, team=team)
