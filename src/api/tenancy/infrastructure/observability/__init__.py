"""Domain-Oriented Observability for tenancy infrastructure."""

from tenancy.infrastructure.observability.repository_probe import (
    DefaultTeamRepositoryProbe,
    TeamRepositoryProbe,
)

__all__ = [
    "DefaultTeamRepositoryProbe",
    "TeamRepositoryProbe",
]
