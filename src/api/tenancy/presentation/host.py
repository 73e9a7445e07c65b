"""Host extraction from inbound requests.

Behind a reverse proxy the ``Host`` header names the proxy's upstream, not
the domain the client typed; the proxy passes the original along as
``X-Forwarded-Host``.
"""

from __future__ import annotations

from collections.abc import Mapping

from starlette.datastructures import Headers
from starlette.types import Scope

FORWARDED_HOST_HEADER = "x-forwarded-host"
HOST_HEADER = "host"


def extract_host(headers: Mapping[str, str], server_name: str | None) -> str:
    """Return the raw host the client intended to reach.

    Precedence is ``X-Forwarded-Host``, then ``Host``, then the server
    name, then the empty string. A header that is present wins even when
    its value is empty. The value is returned as is: port, case and
    whitespace untouched.

    Args:
        headers: Case-insensitive request headers
        server_name: Server host name reported by the ASGI server, if any

    Returns:
        The raw, untrusted host string
    """
    if FORWARDED_HOST_HEADER in headers:
        return headers[FORWARDED_HOST_HEADER]
    if HOST_HEADER in headers:
        return headers[HOST_HEADER]
    return server_name or ""


def extract_host_from_scope(scope: Scope) -> str:
    """Extract the raw host from an ASGI HTTP scope."""
    server = scope.get("server")
    server_name = server[0] if server else None
    return extract_host(Headers(scope=scope), server_name)
