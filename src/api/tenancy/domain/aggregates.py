"""Team aggregate for the tenancy context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from tenancy.domain.value_objects import TeamCode, TeamId


@dataclass
class Team:
    """Team aggregate representing one sports club tenant.

    Teams are the isolation boundary of the system. Each team is addressed
    by its own subdomain, ``{code}.{base_domain}``.

    Business rules:
    - Team codes are unique across the system and never change
    - Deleting a team is a soft delete; deleted teams never resolve
    """

    id: TeamId
    code: str
    name: str
    description: str | None = None
    logo_url: str | None = None
    is_deleted: bool = False
    deleted_at: datetime | None = None

    @classmethod
    def create(
        cls,
        code: str,
        name: str,
        description: str | None = None,
        logo_url: str | None = None,
    ) -> Team:
        """Factory method for creating a new team.

        Args:
            code: The subdomain label of the team
            name: Display name of the team
            description: Optional free text description
            logo_url: Optional URL of the team logo

        Returns:
            A new Team aggregate

        Raises:
            ValueError: If code is not a valid team code
        """
        TeamCode(value=code)
        return cls(
            id=TeamId.generate(),
            code=code,
            name=name,
            description=description,
            logo_url=logo_url,
        )

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        logo_url: str | None = None,
    ) -> None:
        """Update the mutable profile fields. ``None`` leaves a field as is."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if logo_url is not None:
            self.logo_url = logo_url

    def mark_deleted(self) -> None:
        """Soft delete this team."""
        if self.is_deleted:
            return
        self.is_deleted = True
        self.deleted_at = datetime.now(UTC)
