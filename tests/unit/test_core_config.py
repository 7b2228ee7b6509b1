"""Unit tests for Settings validation and environment helpers."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment


@pytest.mark.unit
class TestSettingsDefaults:
    """Test values used when nothing is configured."""

    def test_page_and_cookie_defaults(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)

        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.login_path == "/login"
        assert settings.unauthorized_path == "/unauthorized"
        assert settings.session_cookie_name == "talenttrack_session"
        assert settings.permission_table_path is None
        assert settings.bcrypt_rounds == 12

    def test_environment_read_from_env(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings()

        assert settings.is_production
        assert not settings.is_development
        assert not settings.is_testing
        assert not settings.is_ci


@pytest.mark.unit
class TestSettingsValidation:
    """Test field validators."""

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_out_of_range(self, rounds):
        with pytest.raises(ValidationError, match="bcrypt_rounds"):
            Settings(bcrypt_rounds=rounds)

    def test_api_base_url_trailing_slash_removed(self):
        assert Settings(api_base_url="https://talenttrack.local/").api_base_url == (
            "https://talenttrack.local"
        )

    @pytest.mark.parametrize("field", ["login_path", "unauthorized_path"])
    def test_page_paths_must_be_absolute(self, field):
        with pytest.raises(ValidationError, match="must start with '/'"):
            Settings(**{field: "login"})
