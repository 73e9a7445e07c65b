"""Domain probe for tenant context resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to resolving the tenant of a request
from its host information.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantResolutionProbe(Protocol):
    """Domain probe for tenant context resolution operations."""

    def resolution_exempted(
        self,
        host: str,
        path: str,
        is_admin_request: bool,
    ) -> None:
        """Record that a request skipped tenant resolution."""
        ...

    def tenant_resolved(
        self,
        host: str,
        team_code: str,
    ) -> None:
        """Record that a request resolved to an existing team."""
        ...

    def tenant_not_found(
        self,
        host: str,
        team_code: str,
    ) -> None:
        """Record that a valid team code has no matching team."""
        ...

    def resolution_failed(
        self,
        host: str,
        path: str,
        reason: str,
    ) -> None:
        """Record that the host could not be parsed into a team code."""
        ...

    def slow_resolution(
        self,
        host: str,
        path: str,
        elapsed_ms: float,
    ) -> None:
        """Record that resolving the tenant took longer than expected."""
        ...

    def with_context(self, context: ObservationContext) -> TenantResolutionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantResolutionProbe:
    """Default implementation of TenantResolutionProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTenantResolutionProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantResolutionProbe(logger=self._logger, context=context)

    def resolution_exempted(
        self,
        host: str,
        path: str,
        is_admin_request: bool,
    ) -> None:
        """Record that a request skipped tenant resolution."""
        self._logger.debug(
            "tenant_resolution_exempted",
            host=host,
            path=path,
            is_admin_request=is_admin_request,
            **self._get_context_kwargs(),
        )

    def tenant_resolved(
        self,
        host: str,
        team_code: str,
    ) -> None:
        """Record that a request resolved to an existing team."""
        self._logger.debug(
            "tenant_resolved",
            host=host,
            team_code=team_code,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(
        self,
        host: str,
        team_code: str,
    ) -> None:
        """Record that a valid team code has no matching team."""
        self._logger.warning(
            "tenant_not_found",
            host=host,
            team_code=team_code,
            **self._get_context_kwargs(),
        )

    def resolution_failed(
        self,
        host: str,
        path: str,
        reason: str,
    ) -> None:
        """Record that the host could not be parsed into a team code."""
        self._logger.warning(
            "tenant_resolution_failed",
            host=host,
            path=path,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def slow_resolution(
        self,
        host: str,
        path: str,
        elapsed_ms: float,
    ) -> None:
        """Record that resolving the tenant took longer than expected."""
        self._logger.warning(
            "tenant_resolution_slow",
            host=host,
            path=path,
            elapsed_ms=round(elapsed_ms, 2),
            **self._get_context_kwargs(),
        )
