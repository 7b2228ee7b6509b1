"""API tests for session endpoints (login, current session, logout)."""

import pytest

from src.core.config import settings
from src.domain.enums import UserRole
from tests.conftest import DEMO_EMAILS, DEMO_PASSWORD

SESSIONS = "/api/v1/sessions"


@pytest.mark.api
class TestCreateSession:
    """POST /api/v1/sessions"""

    def test_login_returns_token_and_sets_cookie(self, client):
        response = client.post(
            SESSIONS,
            json={"email": DEMO_EMAILS[UserRole.RECRUITER], "password": DEMO_PASSWORD},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["identity"]["role"] == "recruiter"
        assert data["identity"]["email"] == "recruiter@example.com"
        assert data["identity"]["department"] == "HR"
        assert data["identity"]["avatar"] == "RU"
        assert client.cookies.get(settings.session_cookie_name) == data["token"]

    def test_login_email_is_case_insensitive(self, client):
        response = client.post(
            SESSIONS,
            json={"email": "Viewer@Example.com", "password": DEMO_PASSWORD},
        )

        assert response.status_code == 201

    def test_wrong_password_is_problem_401(self, client):
        response = client.post(
            SESSIONS,
            json={"email": DEMO_EMAILS[UserRole.ADMIN], "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.headers["content-type"].startswith("application/json")
        problem = response.json()
        assert problem["type"].endswith("/errors/invalid_credentials")
        assert problem["detail"] == "Invalid email or password"
        assert problem["trace_id"] == response.headers["X-Trace-Id"]

    def test_unknown_email_is_indistinguishable_from_wrong_password(self, client):
        response = client.post(
            SESSIONS,
            json={"email": "nobody@example.com", "password": DEMO_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_malformed_email_is_422(self, client):
        response = client.post(SESSIONS, json={"email": "nope", "password": "x"})

        assert response.status_code == 422
        fields = [error["field"] for error in response.json()["errors"]]
        assert "email" in fields


@pytest.mark.api
class TestCurrentSession:
    """GET and DELETE /api/v1/sessions/current"""

    def test_no_session_is_401(self, client):
        response = client.get(f"{SESSIONS}/current")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["type"].endswith("/errors/unauthorized")

    def test_bearer_token_returns_identity_and_grants(self, client, login):
        token = login(UserRole.VIEWER)
        client.cookies.clear()

        response = client.get(
            f"{SESSIONS}/current",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["identity"]["role"] == "viewer"
        assert data["identity"]["department"] is None
        assert data["identity"]["avatar"] == "VU"
        assert data["permissions"] == [
            {"action": "read", "subject": "candidates"},
            {"action": "read", "subject": "jobs"},
            {"action": "read", "subject": "interviews"},
        ]

    def test_cookie_session_carries_department_and_avatar(self, client, login):
        login(UserRole.RECRUITER)

        identity = client.get(f"{SESSIONS}/current").json()["identity"]

        assert identity["department"] == "HR"
        assert identity["avatar"] == "RU"

    def test_unknown_bearer_token_is_401(self, client):
        response = client.get(
            f"{SESSIONS}/current",
            headers={"Authorization": "Bearer not-a-session"},
        )

        assert response.status_code == 401

    def test_logout_destroys_session(self, client, login):
        token = login(UserRole.HIRING_MANAGER)
        headers = {"Authorization": f"Bearer {token}"}

        response = client.delete(f"{SESSIONS}/current", headers=headers)

        assert response.status_code == 204
        client.cookies.clear()
        assert client.get(f"{SESSIONS}/current", headers=headers).status_code == 401

    def test_logout_without_session_is_401(self, client):
        assert client.delete(f"{SESSIONS}/current").status_code == 401
