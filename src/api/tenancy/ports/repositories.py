"""Repository protocols (ports) for the tenancy bounded context."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Callable, Protocol, runtime_checkable

from tenancy.domain.aggregates import Team
from tenancy.domain.value_objects import TeamId


@runtime_checkable
class ITeamRepository(Protocol):
    """Repository for Team aggregate persistence.

    Lookups by code only ever see active teams; soft-deleted teams are
    invisible to tenant resolution.
    """

    async def save(self, team: Team) -> None:
        """Persist a team aggregate.

        Creates a new team or updates an existing one.

        Args:
            team: The Team aggregate to persist

        Raises:
            DuplicateTeamCodeError: If the team code already exists
        """
        ...

    async def get_by_id(self, team_id: TeamId) -> Team | None:
        """Retrieve an active team by its ID.

        Args:
            team_id: The unique identifier of the team

        Returns:
            The Team aggregate, or None if not found or deleted
        """
        ...

    async def get_by_code(self, code: str) -> Team | None:
        """Retrieve an active team by its code.

        Args:
            code: The team code, exactly as it appears in the subdomain

        Returns:
            The Team aggregate, or None if not found or deleted
        """
        ...

    async def code_exists(self, code: str) -> bool:
        """Check whether a code is taken, including by deleted teams.

        Args:
            code: The team code

        Returns:
            True if any team row holds the code
        """
        ...

    async def list_active(self) -> list[Team]:
        """List all teams that have not been deleted.

        Returns:
            List of active Team aggregates ordered by code
        """
        ...

    async def soft_delete(self, team: Team) -> bool:
        """Flag a team as deleted without removing its row.

        Args:
            team: The Team aggregate, already marked deleted

        Returns:
            True if the team was updated, False if not found
        """
        ...


# Opens a repository bound to a fresh read session for the duration of the
# context. Used by code that outlives a single FastAPI dependency scope.
TeamRepositoryProvider = Callable[[], AbstractAsyncContextManager[ITeamRepository]]
