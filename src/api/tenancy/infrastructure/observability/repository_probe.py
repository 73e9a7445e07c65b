"""Domain probe for team repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to team persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TeamRepositoryProbe(Protocol):
    """Domain probe for team repository operations."""

    def team_saved(self, team_id: str, code: str) -> None:
        """Record that a team was successfully saved."""
        ...

    def team_retrieved(self, team_id: str) -> None:
        """Record that a team was retrieved."""
        ...

    def team_soft_deleted(self, team_id: str, code: str) -> None:
        """Record that a team was flagged as deleted."""
        ...

    def teams_listed(self, count: int) -> None:
        """Record that active teams were listed."""
        ...

    def duplicate_team_code(self, code: str) -> None:
        """Record that a duplicate team code was detected."""
        ...

    def with_context(self, context: ObservationContext) -> TeamRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTeamRepositoryProbe:
    """Default implementation of TeamRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTeamRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultTeamRepositoryProbe(logger=self._logger, context=context)

    def team_saved(self, team_id: str, code: str) -> None:
        self._logger.info(
            "team_saved",
            team_id=team_id,
            team_code=code,
            **self._get_context_kwargs(),
        )

    def team_retrieved(self, team_id: str) -> None:
        self._logger.debug(
            "team_retrieved",
            team_id=team_id,
            **self._get_context_kwargs(),
        )

    def team_soft_deleted(self, team_id: str, code: str) -> None:
        self._logger.info(
            "team_soft_deleted",
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

    def duplicate_team_code(self, code: str) -> None:
        self._logger.warning(
            "duplicate_team_code",
            team_code=code,
            **self._get_context_kwargs(),
        )
