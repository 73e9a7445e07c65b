"""Tenancy domain layer.

Pure value objects, the Team aggregate and the subdomain resolver. Nothing
in this package performs I/O or depends on a web framework.
"""

from tenancy.domain.aggregates import Team
from tenancy.domain.exceptions import (
    InvalidSubdomainError,
    SubdomainRejection,
    TeamNotFoundError,
)
from tenancy.domain.subdomain import (
    build_team_url,
    is_admin_host,
    resolve_team_code,
    strip_port,
)
from tenancy.domain.value_objects import RESERVED_SUBDOMAINS, TeamCode, TeamId

__all__ = [
    "RESERVED_SUBDOMAINS",
    "InvalidSubdomainError",
    "SubdomainRejection",
    "Team",
    "TeamCode",
    "TeamId",
    "TeamNotFoundError",
    "build_team_url",
    "is_admin_host",
    "resolve_team_code",
    "strip_port",
]
