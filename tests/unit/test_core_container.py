"""Unit tests for container factories."""

import json

import pytest

from src.core.config import Settings
from src.core.container import (
    get_event_bus,
    get_permission_table,
    get_session_store,
    get_user_repository,
)
from src.core.container.events import SESSION_EVENTS
from src.domain.authorization import DEFAULT_PERMISSION_TABLE
from src.domain.enums import UserRole
from src.infrastructure.authorization import PermissionTableError


@pytest.fixture
def fresh_container():
    get_permission_table.cache_clear()
    get_user_repository.cache_clear()
    yield
    get_permission_table.cache_clear()
    get_user_repository.cache_clear()


@pytest.mark.unit
class TestPermissionTableFactory:
    """Test permission table selection."""

    def test_builtin_table_when_no_path(self, fresh_container, monkeypatch):
        monkeypatch.setattr(
            "src.core.container.infrastructure.get_settings",
            lambda: Settings(permission_table_path=None),
        )

        assert get_permission_table() is DEFAULT_PERMISSION_TABLE

    def test_loads_configured_file(self, fresh_container, monkeypatch, tmp_path):
        path = tmp_path / "permissions.json"
        path.write_text(json.dumps({"viewer": []}))
        monkeypatch.setattr(
            "src.core.container.infrastructure.get_settings",
            lambda: Settings(permission_table_path=str(path)),
        )

        table = get_permission_table()

        assert table.grants_for(UserRole.VIEWER) == frozenset()
        assert table.grants_for(UserRole.ADMIN) == frozenset()

    def test_invalid_file_fails_startup(self, fresh_container, monkeypatch, tmp_path):
        monkeypatch.setattr(
            "src.core.container.infrastructure.get_settings",
            lambda: Settings(permission_table_path=str(tmp_path / "missing.json")),
        )

        with pytest.raises(PermissionTableError):
            get_permission_table()


@pytest.mark.unit
class TestSingletons:
    """Test application-scoped caching and wiring."""

    def test_session_store_is_cached(self):
        assert get_session_store() is get_session_store()

    def test_event_bus_subscribes_every_session_event(self):
        get_event_bus.cache_clear()
        bus = get_event_bus()

        for event_class in SESSION_EVENTS:
            assert bus.handler_count(event_class) == 1

    @pytest.mark.asyncio
    async def test_directory_seeded_with_demo_accounts(self, fresh_container, monkeypatch):
        monkeypatch.setattr(
            "src.core.container.infrastructure.get_settings",
            lambda: Settings(seed_demo_users=True, bcrypt_rounds=4),
        )

        users = await get_user_repository().list_all()

        assert {user.role for user in users} == set(UserRole)

    @pytest.mark.asyncio
    async def test_directory_empty_without_seeding(self, fresh_container, monkeypatch):
        monkeypatch.setattr(
            "src.core.container.infrastructure.get_settings",
            lambda: Settings(seed_demo_users=False),
        )

        assert await get_user_repository().list_all() == []
