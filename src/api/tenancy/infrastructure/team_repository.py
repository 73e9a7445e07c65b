"""PostgreSQL implementation of ITeamRepository.

Teams are stored in a single table. Deletion is a soft delete, and every
read path filters deleted rows out so that a deleted team can never be
resolved from a subdomain again.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tenancy.domain.aggregates import Team
from tenancy.domain.value_objects import TeamId
from tenancy.infrastructure.models import TeamModel
from tenancy.infrastructure.observability import (
    DefaultTeamRepositoryProbe,
    TeamRepositoryProbe,
)
from tenancy.ports.exceptions import DuplicateTeamCodeError
from tenancy.ports.repositories import ITeamRepository


class TeamRepository(ITeamRepository):
    """Repository managing PostgreSQL storage for Team aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: TeamRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultTeamRepositoryProbe()

    async def save(self, team: Team) -> None:
        """Persist team metadata to PostgreSQL.

        Args:
            team: The Team aggregate to persist

        Raises:
            DuplicateTeamCodeError: If the team code already exists
        """
        try:
            stmt = select(TeamModel).where(TeamModel.id == team.id.value)
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model:
                # Code is immutable once created
                model.name = team.name
                model.description = team.description
                model.logo_url = team.logo_url
                model.is_deleted = team.is_deleted
                model.deleted_at = team.deleted_at
            else:
                model = TeamModel(
                    id=team.id.value,
                    code=team.code,
                    name=team.name,
                    description=team.description,
                    logo_url=team.logo_url,
                    is_deleted=team.is_deleted,
                    deleted_at=team.deleted_at,
                )
                self._session.add(model)

            await self._session.flush()
            self._probe.team_saved(team.id.value, team.code)

        except IntegrityError as e:
            if "ix_teams_code" in str(e):
                self._probe.duplicate_team_code(team.code)
                raise DuplicateTeamCodeError(team.code) from e
            raise

    async def get_by_id(self, team_id: TeamId) -> Team | None:
        """Fetch an active team by ID.

        Args:
            team_id: The unique identifier of the team

        Returns:
            The Team aggregate, or None if not found or deleted
        """
        stmt = select(TeamModel).where(
            TeamModel.id == team_id.value,
            TeamModel.is_deleted.is_(False),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        self._probe.team_retrieved(model.id)
        return self._to_domain(model)

    async def get_by_code(self, code: str) -> Team | None:
        """Fetch an active team by code.

        The comparison is exact; codes are stored as created.

        Args:
            code: The team code

        Returns:
            The Team aggregate, or None if not found or deleted
        """
        stmt = select(TeamModel).where(
            TeamModel.code == code,
            TeamModel.is_deleted.is_(False),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        self._probe.team_retrieved(model.id)
        return self._to_domain(model)

    async def code_exists(self, code: str) -> bool:
        """Check whether any team, deleted or not, holds a code."""
        stmt = select(TeamModel.id).where(TeamModel.code == code)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_active(self) -> list[Team]:
        """Fetch all active teams ordered by code.

        Returns:
            List of active Team aggregates
        """
        stmt = (
            select(TeamModel)
            .where(TeamModel.is_deleted.is_(False))
            .order_by(TeamModel.code)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        teams = [self._to_domain(model) for model in models]
        self._probe.teams_listed(len(teams))
        return teams

    async def soft_delete(self, team: Team) -> bool:
        """Flag a team as deleted.

        Args:
            team: The Team aggregate (mark_deleted() already called)

        Returns:
            True if the row was updated, False if not found
        """
        stmt = select(TeamModel).where(TeamModel.id == team.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return False

        model.is_deleted = True
        model.deleted_at = team.deleted_at
        await self._session.flush()

        self._probe.team_soft_deleted(team.id.value, team.code)
        return True

    def _to_domain(self, model: TeamModel) -> Team:
        return Team(
            id=TeamId(value=model.id),
            code=model.code,
            name=model.name,
            description=model.description,
            logo_url=model.logo_url,
            is_deleted=model.is_deleted,
            deleted_at=model.deleted_at,
        )
