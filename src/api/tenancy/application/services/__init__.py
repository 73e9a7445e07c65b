"""Application services for the tenancy bounded context.

Application services orchestrate domain aggregates and repositories to
fulfill use cases.
"""

from tenancy.application.services.team_service import TeamService

__all__ = [
    "TeamService",
]
