"""Unit tests for RequestTenantBinder."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from shared_kernel.middleware.observability import TenantResolutionProbe
from shared_kernel.middleware.tenant_context import TenantResolutionOutcome
from tenancy.application.binder import RequestTenantBinder
from tenancy.application.exemption import PathExemptionPolicy
from tenancy.application.team_lookup import TeamLookup
from tenancy.domain.exceptions import SubdomainRejection
from tenancy.domain.value_objects import TeamCode


@pytest.fixture
def mock_team_lookup():
    lookup = Mock(spec=TeamLookup)
    lookup.lookup = AsyncMock(return_value=None)
    return lookup


@pytest.fixture
def mock_probe():
    return Mock(spec=TenantResolutionProbe)


@pytest.fixture
def binder(mock_team_lookup, mock_probe):
    return RequestTenantBinder(
        exemption_policy=PathExemptionPolicy(),
        team_lookup=mock_team_lookup,
        probe=mock_probe,
    )


class TestResolvedRequests:
    """Requests on a team subdomain."""

    @pytest.mark.asyncio
    async def test_existing_team_is_bound(self, binder, mock_team_lookup, make_team):
        team = make_team(code="team-a")
        mock_team_lookup.lookup.return_value = team

        context = await binder.bind("/v1/team/info", "team-a.example.com")

        assert context.outcome == TenantResolutionOutcome.RESOLVED
        assert context.team_code == "team-a"
        assert context.team == team
        assert context.host == "team-a.example.com"
        assert context.is_admin_request is False
        mock_team_lookup.lookup.assert_awaited_once_with(TeamCode("team-a"))

    @pytest.mark.asyncio
    async def test_unknown_team_binds_code_without_team(self, binder, mock_probe):
        context = await binder.bind("/v1/team/info", "team-a.example.com")

        assert context.outcome == TenantResolutionOutcome.NO_TENANT
        assert context.team_code == "team-a"
        assert context.team is None
        mock_probe.tenant_not_found.assert_called_once_with(
            "team-a.example.com", "team-a"
        )

    @pytest.mark.asyncio
    async def test_port_does_not_change_the_result(
        self, binder, mock_team_lookup, make_team
    ):
        team = make_team(code="team-a")
        mock_team_lookup.lookup.return_value = team

        without_port = await binder.bind("/v1/team/info", "team-a.example.com")
        with_port = await binder.bind("/v1/team/info", "team-a.example.com:3000")

        assert with_port.team_code == without_port.team_code
        assert with_port.team == without_port.team
        assert with_port.outcome == without_port.outcome
        assert with_port.host == "team-a.example.com:3000"


class TestExemptRequests:
    """Requests that skip resolution."""

    @pytest.mark.asyncio
    async def test_admin_host_is_exempt_on_any_path(
        self, binder, mock_team_lookup, mock_probe
    ):
        context = await binder.bind("/v1/team/info", "admin.example.com")

        assert context.outcome == TenantResolutionOutcome.EXEMPT
        assert context.is_admin_request is True
        assert context.team_code is None
        assert context.team is None
        mock_team_lookup.lookup.assert_not_awaited()
        mock_probe.resolution_exempted.assert_called_once_with(
            "admin.example.com", "/v1/team/info", True
        )

    @pytest.mark.asyncio
    async def test_exempt_path_beats_unresolvable_host(self, binder, mock_team_lookup):
        """localhost on the admin API yields a context, not an error."""
        context = await binder.bind("/v1/admin/teams", "localhost")

        assert context.outcome == TenantResolutionOutcome.EXEMPT
        assert context.is_admin_request is False
        assert context.failure_reason is None
        mock_team_lookup.lookup.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_team_listing_is_exempt(self, binder, mock_team_lookup):
        context = await binder.bind("/v1/teams", "team-a.example.com")

        assert context.outcome == TenantResolutionOutcome.EXEMPT
        assert context.team_code is None
        mock_team_lookup.lookup.assert_not_awaited()


class TestUnresolvableHosts:
    """Hosts that are not team subdomains never reject the request."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("host", "reason"),
        [
            ("localhost:8000", SubdomainRejection.LOCALHOST),
            ("192.168.0.1", SubdomainRejection.IPV4_LITERAL),
            ("", SubdomainRejection.MISSING_DOMAIN),
            ("www.example.com", SubdomainRejection.RESERVED_LABEL),
        ],
    )
    async def test_resolution_failure_is_bound(
        self, binder, mock_team_lookup, mock_probe, host, reason
    ):
        context = await binder.bind("/v1/team/info", host)

        assert context.outcome == TenantResolutionOutcome.RESOLUTION_FAILED
        assert context.failure_reason == reason
        assert context.team_code is None
        assert context.team is None
        mock_team_lookup.lookup.assert_not_awaited()
        mock_probe.resolution_failed.assert_called_once_with(
            host, "/v1/team/info", reason
        )


class TestFailuresAndTiming:
    """Persistence errors and slow resolutions."""

    @pytest.mark.asyncio
    async def test_persistence_errors_propagate(self, binder, mock_team_lookup):
        mock_team_lookup.lookup.side_effect = ConnectionError("db down")

        with pytest.raises(ConnectionError):
            await binder.bind("/v1/team/info", "team-a.example.com")

    @pytest.mark.asyncio
    async def test_slow_resolution_is_reported(self, mock_team_lookup, mock_probe):
        ticks = iter([10.0, 10.25])
        binder = RequestTenantBinder(
            exemption_policy=PathExemptionPolicy(),
            team_lookup=mock_team_lookup,
            probe=mock_probe,
            slow_threshold_ms=100.0,
            clock=lambda: next(ticks),
        )

        await binder.bind("/v1/team/info", "team-a.example.com")

        mock_probe.slow_resolution.assert_called_once()
        host, path, elapsed_ms = mock_probe.slow_resolution.call_args[0]
        assert host == "team-a.example.com"
        assert path == "/v1/team/info"
        assert elapsed_ms == pytest.approx(250.0)

    @pytest.mark.asyncio
    async def test_fast_resolution_is_not_reported(self, mock_team_lookup, mock_probe):
        ticks = iter([10.0, 10.01])
        binder = RequestTenantBinder(
            exemption_policy=PathExemptionPolicy(),
            team_lookup=mock_team_lookup,
            probe=mock_probe,
            clock=lambda: next(ticks),
        )

        await binder.bind("/v1/team/info", "team-a.example.com")

        mock_probe.slow_resolution.assert_not_called()
