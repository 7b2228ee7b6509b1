"""TalentTrack settings.

Every value comes from an environment variable of the same name (case
insensitive) and falls back to a default that runs locally with no setup:
demo accounts seeded, built-in permission table, human-readable logs.

Usage:
    from src.core.config import settings

    redirect_to = settings.login_path
    if settings.is_production:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


class Settings(BaseSettings):
    """Flat TalentTrack configuration, read from the process environment."""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Runtime
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment; drives log format and /config visibility",
    )
    debug: bool = Field(default=False, description="Force DEBUG logging")
    log_level: str = Field(default="INFO", description="Minimum log level name")

    # Service identity
    app_name: str = Field(default="TalentTrack", description="Shown in OpenAPI docs")
    app_version: str = Field(default="0.1.0", description="Reported by /health")
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL, used to build problem type URIs",
    )
    api_v1_prefix: str = Field(default="/api/v1", description="Mount point of the JSON API")

    # Route guard redirect targets
    login_path: str = Field(
        default="/login",
        description="Where page requests without a session are sent",
    )
    unauthorized_path: str = Field(
        default="/unauthorized",
        description="Where signed-in page requests lacking a permission are sent",
    )

    # Sessions
    session_cookie_name: str = Field(
        default="talenttrack_session",
        description="Cookie carrying the opaque session token",
    )
    session_cookie_secure: bool = Field(
        default=False,
        description="Only send the session cookie over HTTPS",
    )

    # Authorization
    permission_table_path: str | None = Field(
        default=None,
        description="JSON file replacing the built-in role permission table",
    )

    # Password hashing
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt cost factor; tests drop this to 4",
    )

    # Demo directory
    seed_demo_users: bool = Field(
        default=True,
        description="Create one demo account per role at startup",
    )
    demo_user_password: str = Field(
        default="talenttrack",
        description="Shared password of the demo accounts",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def check_bcrypt_rounds(cls, value: int) -> int:
        """bcrypt only accepts cost factors 4 through 31."""
        if not MIN_BCRYPT_ROUNDS <= value <= MAX_BCRYPT_ROUNDS:
            raise ValueError(
                f"bcrypt_rounds must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}"
            )
        return value

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("login_path", "unauthorized_path")
    @classmethod
    def check_page_path(cls, value: str) -> str:
        """Redirect targets must be in-app absolute paths.

        Raises:
            ValueError: If the path does not start with '/'.
        """
        if not value.startswith("/"):
            raise ValueError("page paths must start with '/'")
        return value

    @property
    def is_development(self) -> bool:
        return self.environment is Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment is Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment is Environment.CI

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Build the settings once per process."""
    return Settings()


settings = get_settings()
