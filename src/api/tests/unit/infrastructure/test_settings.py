"""Unit tests for infrastructure settings."""

import pytest
from pydantic import SecretStr, ValidationError

from infrastructure.settings import DatabaseSettings, Settings, TenancySettings


class TestDatabaseSettings:
    """Tests for database connection settings."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_size >= 1
        assert settings.pool_max_overflow >= 0
        assert settings.echo is False

    def test_pool_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_size=0)

    def test_pool_size_respects_upper_limit(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_size=101)

    def test_connection_string_omits_password(self):
        settings = DatabaseSettings(
            host="db",
            port=5433,
            database="clubs",
            username="app",
            password=SecretStr("secret"),
        )

        assert settings.connection_string == "postgresql://app@db:5433/clubs"
        assert "secret" not in settings.connection_string

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("FOOTBALL_DB_HOST", "db.internal")
        monkeypatch.setenv("FOOTBALL_DB_POOL_SIZE", "12")

        settings = DatabaseSettings()

        assert settings.host == "db.internal"
        assert settings.pool_size == 12


class TestTenancySettings:
    """Tests for tenant resolution settings."""

    def test_defaults(self):
        settings = TenancySettings()

        assert settings.base_domain == "footballclub.com"
        assert "/v1/admin/" in settings.exempt_path_prefixes
        assert "/health" in settings.exempt_path_prefixes
        assert settings.exempt_paths == ["/v1/teams"]
        assert settings.lookup_cache_enabled is True
        assert settings.slow_resolution_threshold_ms == 100.0

    def test_negative_ttl_must_not_exceed_ttl(self):
        with pytest.raises(ValidationError) as exc_info:
            TenancySettings(
                lookup_cache_ttl_seconds=5,
                lookup_cache_negative_ttl_seconds=10,
            )

        assert "lookup_cache_negative_ttl_seconds" in str(exc_info.value)

    def test_equal_ttls_are_valid(self):
        settings = TenancySettings(
            lookup_cache_ttl_seconds=5,
            lookup_cache_negative_ttl_seconds=5,
        )
        assert settings.lookup_cache_negative_ttl_seconds == 5

    @pytest.mark.parametrize(
        "field",
        [
            "lookup_cache_max_size",
            "lookup_cache_ttl_seconds",
            "slow_resolution_threshold_ms",
        ],
    )
    def test_non_positive_values_rejected(self, field):
        with pytest.raises(ValidationError):
            TenancySettings(**{field: 0})

    def test_exempt_paths_from_json_environment(self, monkeypatch):
        monkeypatch.setenv(
            "FOOTBALL_TENANCY_EXEMPT_PATH_PREFIXES", '["/internal/", "/health"]'
        )
        monkeypatch.setenv("FOOTBALL_TENANCY_BASE_DOMAIN", "clubs.test")

        settings = TenancySettings()

        assert settings.exempt_path_prefixes == ["/internal/", "/health"]
        assert settings.base_domain == "clubs.test"


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "Football Club API"
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_sections_are_exposed(self):
        settings = Settings()

        assert isinstance(settings.database, DatabaseSettings)
        assert isinstance(settings.tenancy, TenancySettings)
