"""Ports (interfaces) for the tenancy bounded context.

Ports define the contracts for repositories without specifying
implementation details, keeping the domain layer independent of
infrastructure.
"""

from tenancy.ports.exceptions import DuplicateTeamCodeError
from tenancy.ports.repositories import ITeamRepository, TeamRepositoryProvider

__all__ = [
    "DuplicateTeamCodeError",
    "ITeamRepository",
    "TeamRepositoryProvider",
]
