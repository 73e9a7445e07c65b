"""SQLAlchemy ORM models for the tenancy bounded context."""

from tenancy.infrastructure.models.team import TeamModel

__all__ = [
    "TeamModel",
]
