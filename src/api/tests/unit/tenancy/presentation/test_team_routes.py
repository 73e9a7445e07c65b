"""Unit tests for team routes.

The app is built with the real binding middleware and binder; only the
team lookup and the team service are mocked.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from main import create_app
from tenancy.application.binder import RequestTenantBinder
from tenancy.application.exemption import PathExemptionPolicy
from tenancy.application.services import TeamService
from tenancy.application.team_lookup import TeamLookup
from tenancy.dependencies.team import get_team_service
from tenancy.domain.exceptions import TeamNotFoundError
from tenancy.ports.exceptions import DuplicateTeamCodeError


@pytest.fixture
def mock_team_service() -> AsyncMock:
    """Mock TeamService for testing."""
    return AsyncMock(spec=TeamService)


@pytest.fixture
def mock_team_lookup() -> Mock:
    lookup = Mock(spec=TeamLookup)
    lookup.lookup = AsyncMock(return_value=None)
    return lookup


@pytest.fixture
def client(mock_team_service, mock_team_lookup) -> TestClient:
    """Create a TestClient with dependency overrides."""
    binder = RequestTenantBinder(
        exemption_policy=PathExemptionPolicy(),
        team_lookup=mock_team_lookup,
    )
    app = create_app(binder_provider=lambda: binder)
    app.dependency_overrides[get_team_service] = lambda: mock_team_service
    return TestClient(app)


class TestTeamInfo:
    """GET /v1/team/info resolves the host explicitly."""

    def test_returns_team_of_subdomain(self, client, mock_team_service, make_team):
        mock_team_service.get_team_by_code.return_value = make_team(
            code="team-a", name="Team A"
        )

        response = client.get(
            "/v1/team/info", headers={"Host": "team-a.footballclub.com"}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["code"] == "team-a"
        assert body["name"] == "Team A"
        mock_team_service.get_team_by_code.assert_awaited_once_with("team-a")

    def test_port_is_ignored(self, client, mock_team_service, make_team):
        mock_team_service.get_team_by_code.return_value = make_team(code="team-a")

        response = client.get(
            "/v1/team/info", headers={"Host": "team-a.footballclub.com:3000"}
        )

        assert response.status_code == status.HTTP_200_OK
        mock_team_service.get_team_by_code.assert_awaited_once_with("team-a")

    @pytest.mark.parametrize(
        "host", ["localhost", "192.168.0.1", "www.footballclub.com", "footballclub"]
    )
    def test_invalid_subdomain_is_400(self, client, mock_team_service, host):
        response = client.get("/v1/team/info", headers={"Host": host})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "detail": f"Invalid subdomain: {host}",
            "code": "INVALID_SUBDOMAIN",
        }
        mock_team_service.get_team_by_code.assert_not_awaited()

    def test_unknown_team_is_404(self, client, mock_team_service):
        mock_team_service.get_team_by_code.side_effect = TeamNotFoundError("ghost")

        response = client.get(
            "/v1/team/info", headers={"Host": "ghost.footballclub.com"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "TEAM_NOT_FOUND"

    def test_forwarded_host_is_used(self, client, mock_team_service, make_team):
        mock_team_service.get_team_by_code.return_value = make_team(code="team-b")

        response = client.get(
            "/v1/team/info",
            headers={
                "Host": "backend.internal:8080",
                "X-Forwarded-Host": "team-b.footballclub.com",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        mock_team_service.get_team_by_code.assert_awaited_once_with("team-b")


class TestBoundTeam:
    """GET /v1/team serves the team bound by the middleware."""

    def test_returns_bound_team(
        self, client, mock_team_service, mock_team_lookup, make_team
    ):
        mock_team_lookup.lookup.return_value = make_team(code="team-a", name="Team A")

        response = client.get("/v1/team", headers={"Host": "team-a.footballclub.com"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Team A"
        assert response.json()["subdomain_url"] == "https://team-a.footballclub.com"
        mock_team_service.get_team_by_code.assert_not_awaited()

    def test_unknown_team_is_404(self, client):
        response = client.get("/v1/team", headers={"Host": "ghost.footballclub.com"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "detail": "Team not found: ghost",
            "code": "TEAM_NOT_FOUND",
        }

    @pytest.mark.parametrize("host", ["localhost", "10.0.0.1:8000", "api.example.com"])
    def test_unresolvable_host_is_400(self, client, mock_team_lookup, host):
        response = client.get("/v1/team", headers={"Host": host})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "INVALID_SUBDOMAIN"
        mock_team_lookup.lookup.assert_not_awaited()

    def test_admin_host_has_no_team(self, client):
        response = client.get("/v1/team", headers={"Host": "admin.example.com"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestTenantContextEcho:
    """GET /v1/team/context echoes the bound context."""

    def test_resolved_team(self, client, mock_team_lookup, make_team):
        mock_team_lookup.lookup.return_value = make_team(code="team-a", name="Team A")

        response = client.get(
            "/v1/team/context", headers={"Host": "team-a.example.com"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "host": "team-a.example.com",
            "outcome": "resolved",
            "team_code": "team-a",
            "team_name": "Team A",
            "is_admin_request": False,
            "failure_reason": None,
        }

    def test_unknown_team_binds_code_only(self, client):
        response = client.get(
            "/v1/team/context", headers={"Host": "team-a.example.com"}
        )

        body = response.json()
        assert body["outcome"] == "no_tenant"
        assert body["team_code"] == "team-a"
        assert body["team_name"] is None

    def test_admin_host_is_exempt(self, client, mock_team_lookup):
        response = client.get("/v1/team/context", headers={"Host": "admin.example.com"})

        body = response.json()
        assert response.status_code == status.HTTP_200_OK
        assert body["outcome"] == "exempt"
        assert body["is_admin_request"] is True
        assert body["team_code"] is None
        mock_team_lookup.lookup.assert_not_awaited()

    def test_unresolvable_host_still_succeeds(self, client):
        response = client.get("/v1/team/context", headers={"Host": "127.0.0.1:8000"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["outcome"] == "resolution_failed"
        assert response.json()["failure_reason"] == "ipv4_literal"


class TestPublicTeams:
    """GET /v1/teams and GET /v1/teams/code/{code}."""

    def test_list_teams_on_bare_host(
        self, client, mock_team_service, mock_team_lookup, make_team
    ):
        mock_team_service.list_teams.return_value = [make_team(code="team-a")]

        response = client.get("/v1/teams", headers={"Host": "localhost"})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert [t["code"] for t in body] == ["team-a"]
        assert body[0]["subdomain_url"] == "https://team-a.footballclub.com"
        mock_team_lookup.lookup.assert_not_awaited()

    def test_get_by_code(self, client, mock_team_service, make_team):
        mock_team_service.get_team_by_code.return_value = make_team(code="team-a")

        response = client.get("/v1/teams/code/team-a")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["code"] == "team-a"

    def test_get_by_unknown_code_is_404(self, client, mock_team_service):
        mock_team_service.get_team_by_code.side_effect = TeamNotFoundError("ghost")

        response = client.get("/v1/teams/code/ghost")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "detail": "Team not found: ghost",
            "code": "TEAM_NOT_FOUND",
        }


class TestAdminTeams:
    """Admin team management routes."""

    def test_create_team(self, client, mock_team_service, make_team):
        mock_team_service.create_team.return_value = make_team(
            code="team-a", name="Team A"
        )

        response = client.post(
            "/v1/admin/teams",
            json={"code": "team-a", "name": "Team A"},
            headers={"Host": "localhost"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["code"] == "team-a"
        assert body["is_deleted"] is False
        mock_team_service.create_team.assert_awaited_once_with(
            code="team-a", name="Team A", description=None, logo_url=None
        )

    @pytest.mark.parametrize("code", ["a", "Team-A", "team_a", "x" * 21, "admin", "www"])
    def test_create_team_rejects_invalid_code(self, client, mock_team_service, code):
        response = client.post("/v1/admin/teams", json={"code": code, "name": "T"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        mock_team_service.create_team.assert_not_awaited()

    def test_create_team_duplicate_code_is_409(self, client, mock_team_service):
        mock_team_service.create_team.side_effect = DuplicateTeamCodeError("team-a")

        response = client.post(
            "/v1/admin/teams", json={"code": "team-a", "name": "Team A"}
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["code"] == "TEAM_CODE_CONFLICT"

    def test_list_teams(self, client, mock_team_service, make_team):
        mock_team_service.list_teams.return_value = [make_team(code="team-a")]

        response = client.get("/v1/admin/teams")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()[0]["code"] == "team-a"

    def test_update_team(self, client, mock_team_service, make_team):
        team = make_team(code="team-a", name="New")
        mock_team_service.update_team.return_value = team

        response = client.put(f"/v1/admin/teams/{team.id.value}", json={"name": "New"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "New"
        mock_team_service.update_team.assert_awaited_once_with(
            team.id, name="New", description=None, logo_url=None
        )

    def test_update_with_invalid_id_is_400(self, client, mock_team_service):
        response = client.put("/v1/admin/teams/not-a-ulid", json={"name": "New"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        mock_team_service.update_team.assert_not_awaited()

    def test_delete_team(self, client, mock_team_service, make_team):
        team = make_team(code="team-a")

        response = client.delete(f"/v1/admin/teams/{team.id.value}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        mock_team_service.delete_team.assert_awaited_once_with(team.id)

    def test_delete_unknown_team_is_404(self, client, mock_team_service, make_team):
        mock_team_service.delete_team.side_effect = TeamNotFoundError("x")

        response = client.delete(f"/v1/admin/teams/{make_team().id.value}")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestHealth:
    """GET /health is exempt and always answers."""

    def test_health(self, client, mock_team_lookup):
        response = client.get("/health", headers={"Host": "localhost"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok"}
        mock_team_lookup.lookup.assert_not_awaited()
