"""End-to-end tests for the public game endpoints."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from guess.interface.api.app import create_app
from guess.interface.api.request_context import PLAYER_COOKIE
from tests.conftest import ADMIN_AUTH
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(container=build_test_container())
    return TestClient(app_instance)


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestGameInfoEndpoint:
    def test_game_info_and_player_cookie(self, client):
        """First visit describes the game and hands out a player ID."""
        # Act
        response = client.get("/")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["min_value"] == 0
        assert body["max_value"] == 1000
        assert body["captcha_enabled"] is False
        assert UUID(response.cookies[PLAYER_COOKIE])


class TestVoteEndpoint:
    """End-to-end tests for POST /vote."""

    def test_first_vote(self, client):
        # Act
        response = client.post("/vote", json={"value": 0})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["user_value"] == 0
        assert body["average"] == 0
        assert body["target"] == 0
        assert body["is_winner"] is True
        assert body["total_votes"] == 1
        assert len(body["recent_votes"]) == 1
        assert PLAYER_COOKIE in response.cookies

    def test_votes_accumulate(self, client):
        client.post("/vote", json={"value": 300})

        response = client.post("/vote", json={"value": 600})

        body = response.json()
        assert body["average"] == 450
        assert body["target"] == 225
        assert body["is_winner"] is False
        assert body["total_votes"] == 2
        assert [v["value"] for v in body["recent_votes"]] == [600, 300]

    def test_out_of_range_value(self, client):
        response = client.post("/vote", json={"value": 1001})

        assert response.status_code == 400
        assert response.json()["detail"] == "Please submit an integer between 0 and 1000."

    def test_non_integer_value(self, client):
        response = client.post("/vote", json={"value": "lots"})

        assert response.status_code == 422

    def test_forwarded_private_address_is_local(self, client):
        response = client.post(
            "/vote",
            json={"value": 10},
            headers={"X-Forwarded-For": "192.168.1.5, 10.0.0.1"},
        )

        assert response.json()["recent_votes"][0]["location"] == "Local network"

    def test_public_address_is_geolocated(self, client):
        response = client.post(
            "/vote", json={"value": 10}, headers={"X-Forwarded-For": "8.8.8.8"}
        )

        location = response.json()["recent_votes"][0]["location"]
        assert location == "Springfield, Oregon, United States"

    def test_player_rate_limit(self, client):
        """The player cookie caps votes per window."""
        statuses = [
            client.post("/vote", json={"value": i}).status_code for i in range(6)
        ]

        assert statuses == [200] * 5 + [429]

    def test_excluded_window_hides_new_vote(self, client):
        """A vote cast inside an exclude range does not count."""
        now = datetime.now(timezone.utc)
        created = client.post(
            "/admin/constraints",
            json={
                "start": (now - timedelta(hours=1)).isoformat(),
                "end": (now + timedelta(hours=1)).isoformat(),
                "type": "exclude",
            },
            auth=ADMIN_AUTH,
        )
        assert created.status_code == 201

        response = client.post("/vote", json={"value": 500})

        body = response.json()
        assert response.status_code == 200
        assert body["average"] is None
        assert body["target"] is None
        assert body["is_winner"] is False
        assert body["total_votes"] == 0
        assert body["recent_votes"] == []
