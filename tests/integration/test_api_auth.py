"""
Integration tests for the signup, login and dashboard endpoints.
Uses TestClient against the real container with in-memory account repositories.
"""
import time
from unittest.mock import AsyncMock

import jwt
import pytest

from mentorship_api.core.security import verify_password

pytestmark = pytest.mark.integration


def _signup(client, path="/signup", name="A", email="a@example.com", password="p"):
    return client.post(path, json={"name": name, "email": email, "password": password})


def _login(client, path="/login", email="a@example.com", password="p"):
    return client.post(path, json={"email": email, "password": password})


class TestMentorSignup:
    """Tests for POST /signup"""

    def test_signup_success(self, client, mentor_repository):
        response = _signup(client)

        assert response.status_code == 201
        assert response.json() == {"message": "Mentor registered successfully"}

        stored = next(iter(mentor_repository.accounts.values()))
        assert stored.email == "a@example.com"
        assert stored.hashed_password != "p"
        assert verify_password("p", stored.hashed_password)

    def test_duplicate_signup_returns_400(self, client, mentor_repository):
        assert _signup(client).status_code == 201

        response = _signup(client, name="Other")

        assert response.status_code == 400
        assert response.json() == {"error": "Email already registered"}
        matching = [a for a in mentor_repository.accounts.values() if a.email == "a@example.com"]
        assert len(matching) == 1

    def test_same_email_allowed_in_other_role(self, client):
        assert _signup(client).status_code == 201
        assert _signup(client, path="/mentee/signup").status_code == 201

    def test_malformed_body_returns_400(self, client):
        response = client.post("/signup", json={"name": "A", "email": "a@example.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"

    def test_unexpected_failure_returns_500(self, client, mentor_repository, monkeypatch):
        monkeypatch.setattr(
            mentor_repository, "create", AsyncMock(side_effect=RuntimeError("db down"))
        )

        response = _signup(client)

        assert response.status_code == 500
        assert response.json() == {"error": "Signup failed", "details": "db down"}


class TestMentorLogin:
    """Tests for POST /login"""

    def test_login_success_returns_token(self, client, mentor_repository, settings):
        _signup(client)

        response = _login(client)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        claims = jwt.decode(body["token"], settings.secret_key, algorithms=["HS256"])
        assert claims["id"] in mentor_repository.accounts

    def test_unknown_email_returns_400(self, client):
        response = _login(client, email="nobody@example.com")

        assert response.status_code == 400
        assert response.json() == {"error": "Mentor not found"}

    def test_wrong_password_returns_400_without_token(self, client):
        _signup(client)

        response = _login(client, password="wrong")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid credentials"}
        assert "token" not in response.json()

    def test_missing_secret_returns_500(self, client, container, monkeypatch):
        from mentorship_api.core.security import TokenService

        _signup(client)
        monkeypatch.setattr(container.get(TokenService), "secret_key", None)

        response = _login(client)

        assert response.status_code == 500
        assert response.json()["error"] == "Login failed"


class TestMentorDashboard:
    """Tests for GET /mentor-dashboard"""

    def test_dashboard_with_token_returns_account_without_password(self, client):
        _signup(client)
        token = _login(client).json()["token"]

        response = client.get("/mentor-dashboard", headers={"authorization": token})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Welcome to Mentor Dashboard"
        assert body["mentor"]["name"] == "A"
        assert body["mentor"]["email"] == "a@example.com"
        assert "password" not in body["mentor"]
        assert "hashed_password" not in body["mentor"]

    def test_no_token_returns_403(self, client):
        response = client.get("/mentor-dashboard")

        assert response.status_code == 403
        assert response.json() == {"error": "No token provided"}

    def test_tampered_token_returns_401(self, client):
        _signup(client)
        header, payload, signature = _login(client).json()["token"].split(".")
        flipped = ("B" if signature[0] == "A" else "A") + signature[1:]

        response = client.get(
            "/mentor-dashboard", headers={"authorization": f"{header}.{payload}.{flipped}"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized: Invalid token"}

    def test_expired_token_returns_401(self, client, mentor_repository, settings):
        _signup(client)
        account_id = next(iter(mentor_repository.accounts))
        now = int(time.time())
        expired = jwt.encode(
            {"id": account_id, "iat": now - 7200, "exp": now - 1},
            settings.secret_key,
            algorithm="HS256",
        )

        response = client.get("/mentor-dashboard", headers={"authorization": expired})

        assert response.status_code == 401

    def test_bearer_prefixed_token_is_rejected(self, client):
        _signup(client)
        token = _login(client).json()["token"]

        response = client.get("/mentor-dashboard", headers={"authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_account_gone_returns_404(self, client, mentor_repository):
        _signup(client)
        token = _login(client).json()["token"]
        mentor_repository.accounts.clear()

        response = client.get("/mentor-dashboard", headers={"authorization": token})

        assert response.status_code == 404
        assert response.json() == {"error": "Mentor not found"}


class TestMenteeEndpoints:
    """Tests for /mentee/signup, /mentee/login and /mentee-dashboard"""

    def test_mentee_signup_and_login(self, client, mentee_repository, mentor_repository):
        response = _signup(client, path="/mentee/signup", name="M", email="m@example.com")

        assert response.status_code == 201
        assert response.json() == {"message": "Mentee registered successfully!"}
        assert len(mentee_repository.accounts) == 1
        assert len(mentor_repository.accounts) == 0

        login = _login(client, path="/mentee/login", email="m@example.com")
        assert login.status_code == 200
        assert login.json()["message"] == "Login successful"

    def test_mentee_errors_use_message_key(self, client):
        _signup(client, path="/mentee/signup")

        duplicate = _signup(client, path="/mentee/signup")
        assert duplicate.status_code == 400
        assert duplicate.json() == {"message": "Mentee already exists"}

        unknown = _login(client, path="/mentee/login", email="nobody@example.com")
        assert unknown.status_code == 400
        assert unknown.json() == {"message": "Mentee not found"}

        wrong = _login(client, path="/mentee/login", password="wrong")
        assert wrong.status_code == 400
        assert wrong.json() == {"message": "Invalid credentials"}

    def test_mentee_dashboard_looks_up_mentor_collection(self, client):
        """A mentee token resolves against mentors, so a real mentee gets 404."""
        _signup(client, path="/mentee/signup", name="M", email="m@example.com")
        token = _login(client, path="/mentee/login", email="m@example.com").json()["token"]

        response = client.get("/mentee-dashboard", headers={"authorization": token})

        assert response.status_code == 404
        assert response.json() == {"error": "Mentor not found"}

    def test_mentee_dashboard_returns_mentor_for_mentor_token(self, client):
        _signup(client)
        token = _login(client).json()["token"]

        response = client.get("/mentee-dashboard", headers={"authorization": token})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Welcome to Mentee Dashboard"
        assert body["mentor"]["email"] == "a@example.com"

    def test_mentee_dashboard_without_token_returns_403(self, client):
        assert client.get("/mentee-dashboard").status_code == 403


class TestSignupPayloads:
    """Payload shapes the original server accepted"""

    def test_80_character_password_round_trip(self, client):
        password = "x" * 80

        assert _signup(client, password=password).status_code == 201
        response = _login(client, password=password)

        assert response.status_code == 200
        assert "token" in response.json()

    def test_empty_name_is_accepted(self, client):
        response = _signup(client, name="")

        assert response.status_code == 201

    def test_dashboard_exposes_mongo_style_id(self, client, mentor_repository):
        _signup(client)
        token = _login(client).json()["token"]

        mentor = client.get("/mentor-dashboard", headers={"authorization": token}).json()["mentor"]

        assert mentor["_id"] == next(iter(mentor_repository.accounts))
        assert "id" not in mentor

    def test_email_without_public_domain_is_rejected(self, client):
        response = _signup(client, email="a@localhost")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"
