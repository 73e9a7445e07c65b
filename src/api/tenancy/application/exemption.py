"""Path exemption policy for tenant resolution.

Some requests never carry a tenant: the admin API, the API docs, health
probes and the public team listing. They skip resolution entirely.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from tenancy.domain.subdomain import is_admin_host

DEFAULT_EXEMPT_PATH_PREFIXES: tuple[str, ...] = (
    "/v1/admin/",
    "/docs",
    "/redoc",
    "/openapi.json",
    "/health",
)

DEFAULT_EXEMPT_PATHS: frozenset[str] = frozenset({"/v1/teams"})


@dataclass(frozen=True)
class PathExemptionPolicy:
    """Decides whether a request skips tenant resolution.

    Attributes:
        prefixes: Exempt path prefixes, matched on whole path segments
            unless the prefix itself ends in a slash.
        exact_paths: Paths exempt only on an exact match, so that
            ``/v1/teams`` is exempt while ``/v1/teams/code/x`` is not.
    """

    prefixes: tuple[str, ...] = DEFAULT_EXEMPT_PATH_PREFIXES
    exact_paths: frozenset[str] = field(default=DEFAULT_EXEMPT_PATHS)

    @classmethod
    def from_config(
        cls,
        prefixes: Iterable[str],
        exact_paths: Iterable[str],
    ) -> PathExemptionPolicy:
        """Build a policy from configured path lists."""
        return cls(prefixes=tuple(prefixes), exact_paths=frozenset(exact_paths))

    def is_exempt(self, path: str, host: str) -> bool:
        """Check whether a request skips tenant resolution.

        Args:
            path: Request path without query string
            host: Raw host of the request

        Returns:
            True for exempt paths and for the administrative subdomain
        """
        if path in self.exact_paths:
            return True
        if any(_under_prefix(path, prefix) for prefix in self.prefixes):
            return True
        return is_admin_host(host)


def _under_prefix(path: str, prefix: str) -> bool:
    # "/docs" covers "/docs" and "/docs/...", never "/docs-internal".
    if prefix.endswith("/"):
        return path.startswith(prefix)
    return path == prefix or path.startswith(prefix + "/")
