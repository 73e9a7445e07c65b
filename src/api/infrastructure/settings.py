"""Application settings using pydantic-settings.

Settings are loaded from environment variables (and an optional ``.env``
file) with defaults suitable for local development.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        FOOTBALL_DB_HOST: Database host (default: localhost)
        FOOTBALL_DB_PORT: Database port (default: 5432)
        FOOTBALL_DB_DATABASE: Database name (default: footballclub)
        FOOTBALL_DB_USERNAME: Database user (default: footballclub)
        FOOTBALL_DB_PASSWORD: Database password (required in production)
        FOOTBALL_DB_POOL_SIZE: Connections kept per engine (default: 5)
        FOOTBALL_DB_POOL_MAX_OVERFLOW: Extra connections under load (default: 5)
        FOOTBALL_DB_ECHO: Log emitted SQL (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="FOOTBALL_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="footballclub", description="Database name")
    username: str = Field(default="footballclub", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_size: int = Field(
        default=5,
        description="Connections kept open per engine",
        ge=1,
        le=100,
    )
    pool_max_overflow: int = Field(
        default=5,
        description="Connections allowed beyond pool_size under load",
        ge=0,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL statements")

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class TenancySettings(BaseSettings):
    """Subdomain-based tenant resolution settings.

    Environment variables:
        FOOTBALL_TENANCY_BASE_DOMAIN: Domain under which team subdomains live
        FOOTBALL_TENANCY_EXEMPT_PATH_PREFIXES: JSON list of exempt path prefixes
        FOOTBALL_TENANCY_EXEMPT_PATHS: JSON list of paths exempt on exact match
        FOOTBALL_TENANCY_LOOKUP_CACHE_ENABLED: Cache team lookups (default: true)
        FOOTBALL_TENANCY_LOOKUP_CACHE_MAX_SIZE: Cached codes at most (default: 1024)
        FOOTBALL_TENANCY_LOOKUP_CACHE_TTL_SECONDS: Lifetime of a found team
        FOOTBALL_TENANCY_LOOKUP_CACHE_NEGATIVE_TTL_SECONDS: Lifetime of a miss
        FOOTBALL_TENANCY_SLOW_RESOLUTION_THRESHOLD_MS: Slow resolution warning
    """

    model_config = SettingsConfigDict(
        env_prefix="FOOTBALL_TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_domain: str = Field(
        default="footballclub.com",
        description="Domain under which team subdomains live",
    )
    exempt_path_prefixes: list[str] = Field(
        default=["/v1/admin/", "/docs", "/redoc", "/openapi.json", "/health"],
        description="Requests under these path prefixes skip tenant resolution",
    )
    exempt_paths: list[str] = Field(
        default=["/v1/teams"],
        description="Requests to exactly these paths skip tenant resolution",
    )
    lookup_cache_enabled: bool = Field(
        default=True,
        description="Cache team lookups in process",
    )
    lookup_cache_max_size: int = Field(
        default=1024,
        description="Maximum number of cached team codes",
        ge=1,
    )
    lookup_cache_ttl_seconds: float = Field(
        default=60.0,
        description="Lifetime of a cached team",
        gt=0,
    )
    lookup_cache_negative_ttl_seconds: float = Field(
        default=5.0,
        description="Lifetime of a cached unknown code",
        gt=0,
    )
    slow_resolution_threshold_ms: float = Field(
        default=100.0,
        description="Tenant resolutions slower than this are logged as warnings",
        gt=0,
    )

    @model_validator(mode="after")
    def validate_cache_ttls(self) -> "TenancySettings":
        """Validate that unknown codes are not cached longer than teams."""
        if self.lookup_cache_negative_ttl_seconds > self.lookup_cache_ttl_seconds:
            raise ValueError(
                "lookup_cache_negative_ttl_seconds "
                f"({self.lookup_cache_negative_ttl_seconds}) must be <= "
                f"lookup_cache_ttl_seconds ({self.lookup_cache_ttl_seconds})"
            )
        return self


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="FOOTBALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Football Club API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def tenancy(self) -> TenancySettings:
        """Get tenancy settings."""
        return get_tenancy_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()


@lru_cache
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenancy settings."""
    return TenancySettings()
