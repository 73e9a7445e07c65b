"""Domain-Oriented Observability for the tenancy application layer."""

from tenancy.application.observability.team_lookup_probe import (
    DefaultTeamLookupProbe,
    TeamLookupProbe,
)
from tenancy.application.observability.team_service_probe import (
    DefaultTeamServiceProbe,
    TeamServiceProbe,
)

__all__ = [
    "DefaultTeamLookupProbe",
    "DefaultTeamServiceProbe",
    "TeamLookupProbe",
    "TeamServiceProbe",
]
