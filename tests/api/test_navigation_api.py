"""API tests for the navigation endpoint."""

import pytest

from src.domain.enums import UserRole

NAVIGATION = "/api/v1/navigation"


@pytest.mark.api
class TestNavigation:
    """GET /api/v1/navigation"""

    def test_no_session_is_401(self, client):
        assert client.get(NAVIGATION).status_code == 401

    def test_viewer_has_no_admin_sections(self, client, login):
        login(UserRole.VIEWER)

        data = client.get(NAVIGATION).json()

        assert [s["title"] for s in data["sections"]] == ["Main"]
        assert data["user_menu"] == []

    def test_interviews_link_follows_read_interviews(self, client, login):
        login(UserRole.VIEWER)

        main = client.get(NAVIGATION).json()["sections"][0]

        assert {"path": "/interviews", "label": "Interviews"} in main["items"]

    def test_admin_has_every_section_and_settings_menu(self, client, login):
        login(UserRole.ADMIN)

        data = client.get(NAVIGATION).json()

        assert [s["title"] for s in data["sections"]] == ["Main", "User Management", "Settings"]
        assert data["user_menu"] == [{"path": "/settings", "label": "Settings"}]
