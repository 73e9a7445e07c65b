"""ASGI middleware binding the tenant context of each request.

The context is computed once, before routing, and stored on the request
state where ``get_tenant_context`` picks it up. Its host and team code are
also bound to the structlog context for every log line of the request.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog
from starlette.types import ASGIApp, Receive, Scope, Send

from shared_kernel.middleware.tenant_context import TENANT_CONTEXT_STATE_KEY
from tenancy.application.binder import RequestTenantBinder
from tenancy.presentation.host import extract_host_from_scope


class TenantBindingMiddleware:
    """Runs tenant resolution for every HTTP request.

    Binding happens at most once per request: if a context is already on
    the request state (for example when the middleware is mounted twice) it
    is left alone.
    """

    def __init__(
        self,
        app: ASGIApp,
        binder_provider: Callable[[], RequestTenantBinder],
    ) -> None:
        self.app = app
        self._binder_provider = binder_provider

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        state = scope.setdefault("state", {})
        context = state.get(TENANT_CONTEXT_STATE_KEY)
        if context is None:
            binder = self._binder_provider()
            context = await binder.bind(
                path=scope.get("path", ""),
                host=extract_host_from_scope(scope),
            )
            state[TENANT_CONTEXT_STATE_KEY] = context

        with structlog.contextvars.bound_contextvars(
            host=context.host,
            team_code=context.team_code,
        ):
            await self.app(scope, receive, send)
