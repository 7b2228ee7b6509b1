"""Pytest configuration and shared fixtures.

Environment variables are set before any ``src`` import so the module-level
settings singleton picks up the test configuration (JSON logs, cheap bcrypt).
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_DEMO_USERS", "true")
os.environ.setdefault("DEMO_USER_PASSWORD", "talenttrack")

from collections.abc import Callable, Iterator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.core.container import (  # noqa: E402
    get_event_bus,
    get_permission_table,
    get_session_store,
    get_user_repository,
)
from src.domain.entities import Identity, Session  # noqa: E402
from src.domain.enums import UserRole  # noqa: E402

DEMO_PASSWORD = "talenttrack"

DEMO_EMAILS: dict[UserRole, str] = {
    UserRole.ADMIN: "admin@example.com",
    UserRole.RECRUITER: "recruiter@example.com",
    UserRole.HIRING_MANAGER: "manager@example.com",
    UserRole.VIEWER: "viewer@example.com",
}


def make_session(role: UserRole, name: str | None = None) -> Session:
    """Build a Session for a role without going through login."""
    return Session(
        id=uuid7(),
        token=f"token-{role.value}",
        identity=Identity(
            user_id=uuid7(),
            name=name or f"{role.value.title()} User",
            email=f"{role.value}@example.com",
            role=role,
        ),
    )


@pytest.fixture
def session_factory() -> Callable[[UserRole], Session]:
    """Factory fixture for role sessions."""
    return make_session


@pytest.fixture
def admin_session() -> Session:
    return make_session(UserRole.ADMIN)


@pytest.fixture
def recruiter_session() -> Session:
    return make_session(UserRole.RECRUITER)


@pytest.fixture
def hiring_manager_session() -> Session:
    return make_session(UserRole.HIRING_MANAGER)


@pytest.fixture
def viewer_session() -> Session:
    return make_session(UserRole.VIEWER)


def _clear_container() -> None:
    for factory in (
        get_event_bus,
        get_permission_table,
        get_session_store,
        get_user_repository,
    ):
        factory.cache_clear()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient with a fresh directory, session store and event bus.

    Server exceptions are rendered as 500 responses instead of re-raised so
    the catch-all handler is exercised like in production.
    """
    from src.main import app

    _clear_container()
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    _clear_container()


@pytest.fixture
def login(client: TestClient) -> Callable[[UserRole], str]:
    """Log in as the demo account of a role; returns the session token.

    The TestClient keeps the session cookie, so later page requests are
    authenticated as well.
    """

    def _login(role: UserRole) -> str:
        response = client.post(
            "/api/v1/sessions",
            json={"email": DEMO_EMAILS[role], "password": DEMO_PASSWORD},
        )
        assert response.status_code == 201, response.text
        return response.json()["token"]

    return _login
