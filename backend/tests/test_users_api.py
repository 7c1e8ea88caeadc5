"""
Tests for /api/users and /api/timezones endpoints, and the auth gate.
"""
import pytest

from conftest import ALICE, BOB


@pytest.mark.integration
class TestAuthGate:

    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/contacts"),
            ("get", "/api/groups"),
            ("get", "/api/interactions"),
            ("get", "/api/interaction-types"),
            ("get", "/api/users/me"),
            ("get", "/api/timezones"),
            ("post", "/api/ai/query"),
        ],
    )
    def test_requires_identity(self, client, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 401
        assert response.json() == {"detail": "Not authenticated"}

    def test_blank_identity_is_rejected(self, client):
        assert client.get("/api/users/me", headers={"X-User-Id": "  "}).status_code == 401

    def test_health_is_public(self, client):
        assert client.get("/health").json() == {"ok": True}


@pytest.mark.integration
class TestUserEndpoints:

    def test_first_request_creates_user_with_config(self, client):
        response = client.get("/api/users/me", headers=ALICE)
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "user-alice"
        assert data["name"] == "Alice"
        assert data["email"] == "alice@example.com"
        assert data["subscribed"] is False
        assert data["config"]["reminder_emails"] is True
        assert data["config"]["keep_in_touch"] is False
        assert data["config"]["timezone_id"] is None

    def test_init_is_idempotent(self, client):
        first = client.post("/api/users/init", headers=BOB).json()
        second = client.post("/api/users/init", headers=BOB).json()
        assert first == second

    def test_profile_hints_only_apply_on_first_sight(self, client):
        client.get("/api/users/me", headers=ALICE)
        again = client.get("/api/users/me", headers={**ALICE, "X-User-Name": "Someone Else"}).json()
        assert again["name"] == "Alice"

    def test_update_profile(self, client):
        response = client.patch("/api/users/me", json={"name": "Alicia"}, headers=ALICE)
        assert response.status_code == 200
        assert response.json()["name"] == "Alicia"
        assert response.json()["email"] == "alice@example.com"

    def test_update_profile_validation(self, client):
        assert client.patch("/api/users/me", json={"name": "Al"}, headers=ALICE).status_code == 422
        assert client.patch("/api/users/me", json={"name": "a" * 21}, headers=ALICE).status_code == 422
        assert client.patch("/api/users/me", json={"email": "bad"}, headers=ALICE).status_code == 422
        long_email = "a" * 45 + "@example.com"
        assert client.patch("/api/users/me", json={"email": long_email}, headers=ALICE).status_code == 422

    def test_update_config_upserts(self, client):
        timezones = client.get("/api/timezones", headers=ALICE).json()
        tz = next(t for t in timezones if t["name"] == "Asia/Kolkata")

        # no /me call first: the config row does not exist yet
        response = client.put(
            "/api/users/me/config", json={"keepInTouch": True, "timezoneId": tz["id"]}, headers=BOB
        )
        assert response.status_code == 200
        config = response.json()["config"]
        assert config["keep_in_touch"] is True
        assert config["reminder_emails"] is True
        assert config["timezone"]["offset"] == 5.5

        response = client.put("/api/users/me/config", json={"reminderEmails": False}, headers=BOB)
        config = response.json()["config"]
        assert config["reminder_emails"] is False
        assert config["keep_in_touch"] is True
        assert config["timezone_id"] == tz["id"]

    def test_update_config_unknown_timezone(self, client):
        response = client.put("/api/users/me/config", json={"timezoneId": 99999}, headers=ALICE)
        assert response.status_code == 404


@pytest.mark.integration
def test_timezones_sorted_by_offset(client):
    timezones = client.get("/api/timezones", headers=ALICE).json()
    assert len(timezones) > 10
    offsets = [t["offset"] for t in timezones]
    assert offsets == sorted(offsets)
