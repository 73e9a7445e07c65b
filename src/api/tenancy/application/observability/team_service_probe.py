"""Protocol for team application service observability.

Defines the interface for domain probes that capture application-level
domain events for team management operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TeamServiceProbe(Protocol):
    """Domain probe for team application service operations."""

    def team_created(self, team_id: str, code: str) -> None:
        """Record that a team was created."""
        ...

    def team_updated(self, team_id: str, code: str) -> None:
        """Record that a team profile was updated."""
        ...

    def team_deleted(self, team_id: str, code: str) -> None:
        """Record that a team was soft deleted."""
        ...

    def teams_listed(self, count: int) -> None:
        """Record that teams were listed."""
        ...

    def team_not_found(self, identifier: str) -> None:
        """Record that a team was not found."""
        ...

    def duplicate_team_code(self, code: str) -> None:
        """Record that a duplicate team code was detected."""
        ...

    def with_context(self, context: ObservationContext) -> TeamServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTeamServiceProbe:
    """Default implementation of TeamServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTeamServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultTeamServiceProbe(logger=self._logger, context=context)

    def team_created(self, team_id: str, code: str) -> None:
        self._logger.info(
            "team_created",
            team_id=team_id,
            team_code=code,
            **self._get_context_kwargs(),
        )

    def team_updated(self, team_id: str, code: str) -> None:
        self._logger.info(
            "team_updated",
            team_id=team_id,
            team_code=code,
            **self._get_context_kwargs(),
        )

    def team_deleted(self, team_id: str, code: str) -> None:
        self._logger.info(
            "team_deleted",
            team_id=team_id,
            team_code=code,
            **self._get_context_kwargs(),
        )

    def teams_listed(self, count: int) -> None:
        self._logger.debug(
            "teams_listed",
            count=count,
            **self._get_context_kwargs(),
        )

    def team_not_found(self, identifier: str) -> None:
        self._logger.debug(
            "team_not_found",
            identifier=identifier,
            **self._get_context_kwargs(),
        )

    def duplicate_team_code(self, code: str) -> None:
        self._logger.warning(
            "duplicate_team_code",
            team_code=code,
            **self._get_context_kwargs(),
        )
