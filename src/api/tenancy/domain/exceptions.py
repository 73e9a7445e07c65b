"""Domain exceptions for the tenancy bounded context.

Each exception carries a machine-readable ``code`` that the API boundary
uses as the error code of the HTTP response.
"""

from __future__ import annotations

from enum import StrEnum


class SubdomainRejection(StrEnum):
    """Reason a host was not accepted as a team subdomain."""

    LOCALHOST = "localhost"
    IPV4_LITERAL = "ipv4_literal"
    MISSING_DOMAIN = "missing_domain"
    EMPTY_LABEL = "empty_label"
    RESERVED_LABEL = "reserved_label"
    ILLEGAL_CHARACTERS = "illegal_characters"
    NOT_RESOLVED = "not_resolved"


class InvalidSubdomainError(ValueError):
    """Raised when a host does not parse to a team-shaped subdomain label.

    Covers bare IPs and ``localhost``, hosts without a dot, and first labels
    that are empty, reserved or contain illegal characters.
    """

    code = "INVALID_SUBDOMAIN"

    def __init__(self, host: str, reason: SubdomainRejection | str) -> None:
        super().__init__(f"Invalid subdomain: {host}")
        self.host = host
        self.reason = str(reason)


class TeamNotFoundError(Exception):
    """Raised when an endpoint requires a team that does not exist.

    The tenant resolution middleware never raises this; it represents a
    missing team as an absent value on the tenant context.
    """

    code = "TEAM_NOT_FOUND"

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Team not found: {identifier}")
        self.identifier = identifier
