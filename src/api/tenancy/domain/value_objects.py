"""Value objects for the tenancy domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ulid import ULID

# First labels that never identify a team.
RESERVED_SUBDOMAINS: frozenset[str] = frozenset({"www", "admin", "api"})

# The reserved label that designates administrative access.
ADMIN_SUBDOMAIN = "admin"

TEAM_CODE_PATTERN = re.compile(r"[A-Za-z0-9-]+", re.ASCII)


def is_reserved_subdomain(label: str) -> bool:
    """Check whether a host label is one of the reserved names.

    DNS labels are case-insensitive, so ``WWW`` is reserved too.
    """
    return label.lower() in RESERVED_SUBDOMAINS


@dataclass(frozen=True)
class TeamId:
    """Identifier for a Team aggregate.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> TeamId:
        """Generate a new TeamId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> TeamId:
        """Create TeamId from string value.

        Args:
            value: ULID string

        Returns:
            TeamId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid TeamId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class TeamCode:
    """Validated team identifier carried by a subdomain label.

    A TeamCode is nonempty, uses only letters, digits and hyphens, and is
    never one of the reserved subdomain names.

    Raises:
        ValueError: On construction with an invalid value.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("TeamCode must not be empty")
        if is_reserved_subdomain(self.value):
            raise ValueError(f"TeamCode must not be a reserved name: {self.value}")
        if TEAM_CODE_PATTERN.fullmatch(self.value) is None:
            raise ValueError(f"TeamCode contains illegal characters: {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value
