"""Domain probe for team lookups during tenant resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TeamLookupProbe(Protocol):
    """Domain probe for team lookup operations."""

    def cache_hit(self, team_code: str, found: bool) -> None:
        """Record that a lookup was answered from the cache."""
        ...

    def cache_miss(self, team_code: str) -> None:
        """Record that a lookup had to go to the repository."""
        ...

    def cache_store_skipped(self, team_code: str) -> None:
        """Record that a result was discarded because the code was invalidated."""
        ...

    def cache_invalidated(self, team_code: str) -> None:
        """Record that a cached code was invalidated."""
        ...

    def with_context(self, context: ObservationContext) -> TeamLookupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTeamLookupProbe:
    """Default implementation of TeamLookupProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTeamLookupProbe:
        """Create a new probe with observation context bound."""
        return DefaultTeamLookupProbe(logger=self._logger, context=context)

    def cache_hit(self, team_code: str, found: bool) -> None:
        self._logger.debug(
            "team_lookup_cache_hit",
            team_code=team_code,
            found=found,
            **self._get_context_kwargs(),
        )

    def cache_miss(self, team_code: str) -> None:
        self._logger.debug(
            "team_lookup_cache_miss",
            team_code=team_code,
            **self._get_context_kwargs(),
        )

    def cache_store_skipped(self, team_code: str) -> None:
        self._logger.debug(
            "team_lookup_cache_store_skipped",
            team_code=team_code,
            **self._get_context_kwargs(),
        )

    def cache_invalidated(self, team_code: str) -> None:
        self._logger.info(
            "team_lookup_cache_invalidated",
            team_code=team_code,
            **self._get_context_kwargs(),
        )
