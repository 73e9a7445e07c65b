"""Subdomain resolution.

Turns the raw host of a request into a validated team code. Everything here
is a pure function of its arguments: no I/O, no hidden state.

    team-a.footballclub.com:8080  ->  TeamCode("team-a")
    admin.footballclub.com        ->  InvalidSubdomainError (reserved_label)
    127.0.0.1:8000                ->  InvalidSubdomainError (ipv4_literal)
"""

from __future__ import annotations

import re

from tenancy.domain.exceptions import InvalidSubdomainError, SubdomainRejection
from tenancy.domain.value_objects import (
    ADMIN_SUBDOMAIN,
    TEAM_CODE_PATTERN,
    TeamCode,
    is_reserved_subdomain,
)

_IPV4_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")
_LOCALHOST = "localhost"


def strip_port(host: str) -> str:
    """Drop a ``:port`` suffix from a host."""
    return host.split(":")[0]


def _first_label(host: str) -> str:
    return strip_port(host).split(".")[0]


def resolve_team_code(host: str) -> TeamCode:
    """Resolve the team code carried by the first label of a host.

    Checks are applied in order and the first failing one decides the
    rejection reason.

    Args:
        host: Raw, untrusted host string (may include a port).

    Returns:
        The validated TeamCode.

    Raises:
        InvalidSubdomainError: If the host is ``localhost``, an IPv4 literal,
            has fewer than two labels, or its first label is empty, reserved
            or contains characters outside letters, digits and hyphen.
    """
    # A fully qualified name may end in a dot; it names the same host.
    hostname = strip_port(host).rstrip(".")

    if hostname == _LOCALHOST:
        raise InvalidSubdomainError(host, SubdomainRejection.LOCALHOST)

    if _IPV4_PATTERN.fullmatch(hostname):
        raise InvalidSubdomainError(host, SubdomainRejection.IPV4_LITERAL)

    labels = hostname.split(".")
    if len(labels) < 2:
        raise InvalidSubdomainError(host, SubdomainRejection.MISSING_DOMAIN)

    candidate = labels[0]
    if not candidate:
        raise InvalidSubdomainError(host, SubdomainRejection.EMPTY_LABEL)

    if is_reserved_subdomain(candidate):
        raise InvalidSubdomainError(host, SubdomainRejection.RESERVED_LABEL)

    if TEAM_CODE_PATTERN.fullmatch(candidate) is None:
        raise InvalidSubdomainError(host, SubdomainRejection.ILLEGAL_CHARACTERS)

    return TeamCode(value=candidate)


def is_admin_host(host: str) -> bool:
    """Check whether a host addresses the administrative subdomain.

    Only the first label matters; the rest of the host is not validated.
    """
    return _first_label(host).lower() == ADMIN_SUBDOMAIN


def build_team_url(team_code: str, base_domain: str, scheme: str = "https") -> str:
    """Build the public URL of a team's subdomain.

    Example:
        >>> build_team_url("team-a", "footballclub.com")
        'https://team-a.footballclub.com'
    """
    return f"{scheme}://{team_code}.{base_domain.lstrip('.')}"
