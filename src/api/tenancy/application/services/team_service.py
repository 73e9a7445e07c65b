"""Team application service for the tenancy bounded context.

Handles team management operations (create, read, list, update, delete).
Every write drops the team's code from the lookup cache once the
transaction has committed.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.application.observability import (
    DefaultTeamServiceProbe,
    TeamServiceProbe,
)
from tenancy.application.team_lookup import TeamLookup
from tenancy.domain.aggregates import Team
from tenancy.domain.exceptions import TeamNotFoundError
from tenancy.domain.value_objects import TeamId
from tenancy.ports.exceptions import DuplicateTeamCodeError
from tenancy.ports.repositories import ITeamRepository


class TeamService:
    """Application service for team management."""

    def __init__(
        self,
        team_repository: ITeamRepository,
        session: AsyncSession,
        team_lookup: TeamLookup,
        probe: TeamServiceProbe | None = None,
    ):
        """Initialize TeamService with dependencies.

        Args:
            team_repository: Repository for team persistence
            session: Database session for transaction management
            team_lookup: Lookup whose cache must follow team writes
            probe: Optional domain probe for observability
        """
        self._team_repository = team_repository
        self._session = session
        self._team_lookup = team_lookup
        self._probe = probe or DefaultTeamServiceProbe()

    async def create_team(
        self,
        code: str,
        name: str,
        description: str | None = None,
        logo_url: str | None = None,
    ) -> Team:
        """Create a new team.

        Args:
            code: Subdomain label of the new team
            name: Display name
            description: Optional description
            logo_url: Optional logo URL

        Returns:
            The created Team aggregate

        Raises:
            DuplicateTeamCodeError: If the code is already taken
        """
        async with self._session.begin():
            try:
                if await self._team_repository.code_exists(code):
                    raise DuplicateTeamCodeError(code)

                team = Team.create(
                    code=code,
                    name=name,
                    description=description,
                    logo_url=logo_url,
                )
                await self._team_repository.save(team)

            except DuplicateTeamCodeError:
                self._probe.duplicate_team_code(code)
                raise

        # A negative entry for this code may be cached
        self._team_lookup.invalidate(team.code)
        self._probe.team_created(team_id=team.id.value, code=team.code)
        return team

    async def update_team(
        self,
        team_id: TeamId,
        name: str | None = None,
        description: str | None = None,
        logo_url: str | None = None,
    ) -> Team:
        """Update a team's profile fields.

        Args:
            team_id: The team to update
            name: New name, or None to keep
            description: New description, or None to keep
            logo_url: New logo URL, or None to keep

        Returns:
            The updated Team aggregate

        Raises:
            TeamNotFoundError: If no active team has this ID
        """
        async with self._session.begin():
            team = await self._team_repository.get_by_id(team_id)
            if team is None:
                self._probe.team_not_found(identifier=team_id.value)
                raise TeamNotFoundError(team_id.value)

            team.update(name=name, description=description, logo_url=logo_url)
            await self._team_repository.save(team)

        self._team_lookup.invalidate(team.code)
        self._probe.team_updated(team_id=team.id.value, code=team.code)
        return team

    async def delete_team(self, team_id: TeamId) -> None:
        """Soft delete a team.

        After this returns, the team's subdomain no longer resolves.

        Args:
            team_id: The team to delete

        Raises:
            TeamNotFoundError: If no active team has this ID
        """
        async with self._session.begin():
            team = await self._team_repository.get_by_id(team_id)
            if team is None:
                self._probe.team_not_found(identifier=team_id.value)
                raise TeamNotFoundError(team_id.value)

            team.mark_deleted()
            await self._team_repository.soft_delete(team)

        self._team_lookup.invalidate(team.code)
        self._probe.team_deleted(team_id=team.id.value, code=team.code)

    async def list_teams(self) -> list[Team]:
        """List all active teams.

        Returns:
            Active Team aggregates ordered by code
        """
        teams = await self._team_repository.list_active()
        self._probe.teams_listed(count=len(teams))
        return teams

    async def get_team_by_code(self, code: str) -> Team:
        """Retrieve an active team by its code.

        Args:
            code: The team code

        Returns:
            The Team aggregate

        Raises:
            TeamNotFoundError: If no active team has this code
        """
        team = await self._team_repository.get_by_code(code)
        if team is None:
            self._probe.team_not_found(identifier=code)
            raise TeamNotFoundError(code)
        return team
