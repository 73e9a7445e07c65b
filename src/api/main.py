"""Main FastAPI application entry point."""

from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware import Middleware

from infrastructure.database.dependencies import close_database_connections
from infrastructure.exception_handlers import register_exception_handlers
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from tenancy.application.binder import RequestTenantBinder
from tenancy.dependencies.team import get_request_tenant_binder
from tenancy.presentation import router as tenancy_router
from tenancy.presentation.errors import TENANCY_ERROR_STATUS
from tenancy.presentation.middleware import TenantBindingMiddleware


@asynccontextmanager
async def football_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration on startup
    - Database engine disposal on shutdown
    """
    configure_logging(get_settings())

    yield

    await close_database_connections()


def create_app(
    binder_provider: Callable[[], RequestTenantBinder] = get_request_tenant_binder,
) -> FastAPI:
    """Build the application.

    Middleware runs in list order, outermost first. Tenant binding must
    come before anything that reads the tenant context.

    Args:
        binder_provider: Supplies the binder used for every request

    Returns:
        The configured FastAPI application
    """
    settings = get_settings()

    middleware = [
        Middleware(TenantBindingMiddleware, binder_provider=binder_provider),
    ]

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant football club management API",
        version=__version__,
        debug=settings.debug,
        lifespan=football_lifespan,
        middleware=middleware,
    )

    register_exception_handlers(app, TENANCY_ERROR_STATUS)

    app.include_router(tenancy_router)

    @app.get("/health")
    def health():
        """Basic health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
