"""Team lookup by validated team code.

Wraps the repository's "find active team by code" with an optional
in-process cache. A code nobody owns is a normal result (``None``), not an
error.
"""

from __future__ import annotations

from tenancy.application.cache import TeamLookupCache
from tenancy.application.observability import (
    DefaultTeamLookupProbe,
    TeamLookupProbe,
)
from tenancy.domain.aggregates import Team
from tenancy.domain.value_objects import TeamCode
from tenancy.ports.repositories import TeamRepositoryProvider


class TeamLookup:
    """Resolves a TeamCode to the team that owns it."""

    def __init__(
        self,
        repository_provider: TeamRepositoryProvider,
        cache: TeamLookupCache | None = None,
        probe: TeamLookupProbe | None = None,
    ) -> None:
        """Initialize the lookup.

        Args:
            repository_provider: Opens a team repository for one lookup
            cache: Optional lookup cache; None disables caching
            probe: Optional domain probe for observability
        """
        self._repository_provider = repository_provider
        self._cache = cache
        self._probe = probe or DefaultTeamLookupProbe()

    async def lookup(self, code: TeamCode) -> Team | None:
        """Find the active team owning a code.

        Args:
            code: Validated team code

        Returns:
            The Team, or None when no active team owns the code

        Raises:
            Any persistence error from the repository, unchanged.
        """
        key = code.value

        if self._cache is None:
            return await self._fetch(key)

        cached = self._cache.get(key)
        if cached is not None:
            self._probe.cache_hit(key, found=cached.team is not None)
            return cached.team

        self._probe.cache_miss(key)
        token = self._cache.token(key)
        team = await self._fetch(key)
        if not self._cache.put(key, team, token):
            self._probe.cache_store_skipped(key)
        return team

    def invalidate(self, code: str) -> None:
        """Forget any cached result for a code."""
        if self._cache is None:
            return
        self._cache.invalidate(code)
        self._probe.cache_invalidated(code)

    async def _fetch(self, code: str) -> Team | None:
        async with self._repository_provider() as repository:
            return await repository.get_by_code(code)
