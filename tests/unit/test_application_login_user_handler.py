"""Unit tests for LoginUserHandler.

Tests cover:
- Successful login (returns session)
- Invalid credentials (user not found, wrong password)
- Account inactive
- Event publishing (ATTEMPTED, SUCCEEDED, FAILED)

Architecture:
- Mocked repository, password service, session store and event bus
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.session_commands import LoginUser
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from src.domain.entities import Identity, Session, User
from src.domain.enums import UserRole
from src.domain.events import UserLoginAttempted, UserLoginFailed, UserLoginSucceeded


def create_user(is_active: bool = True) -> User:
    return User(
        id=uuid7(),
        name="Recruiter User",
        email="recruiter@example.com",
        role=UserRole.RECRUITER,
        password_hash="hashed_password",
        department="HR",
        is_active=is_active,
    )


def build_handler(
    user: User | None,
    password_ok: bool = True,
) -> tuple[LoginUserHandler, AsyncMock, Mock, AsyncMock, AsyncMock]:
    user_repo = AsyncMock()
    user_repo.find_by_email.return_value = user

    password_service = Mock()
    password_service.verify_password.return_value = password_ok

    session_store = AsyncMock()

    async def create(identity: Identity) -> Session:
        return Session(id=uuid7(), token="tok", identity=identity)

    session_store.create.side_effect = create

    event_bus = AsyncMock()

    handler = LoginUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        session_store=session_store,
        event_bus=event_bus,
    )
    return handler, user_repo, password_service, session_store, event_bus


def published(event_bus: AsyncMock) -> list[object]:
    return [call.args[0] for call in event_bus.publish.call_args_list]


@pytest.mark.unit
class TestLoginUserHandlerSuccess:
    """Test successful login scenarios."""

    @pytest.mark.asyncio
    async def test_login_success_returns_session(self):
        user = create_user()
        handler, _, password_service, session_store, _ = build_handler(user)

        result = await handler.handle(
            LoginUser(email="recruiter@example.com", password="talenttrack")
        )

        assert isinstance(result, Success)
        assert result.value.identity.user_id == user.id
        assert result.value.role is UserRole.RECRUITER
        password_service.verify_password.assert_called_once_with(
            "talenttrack", "hashed_password"
        )
        session_store.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_login_success_publishes_attempted_then_succeeded(self):
        handler, _, _, _, event_bus = build_handler(create_user())

        result = await handler.handle(
            LoginUser(email="recruiter@example.com", password="talenttrack")
        )

        events = published(event_bus)
        assert [type(e) for e in events] == [UserLoginAttempted, UserLoginSucceeded]
        succeeded = events[1]
        assert succeeded.role == "recruiter"
        assert succeeded.session_id == result.value.id


@pytest.mark.unit
class TestLoginUserHandlerFailure:
    """Test failed login scenarios."""

    @pytest.mark.asyncio
    async def test_unknown_email_is_invalid_credentials(self):
        handler, _, password_service, session_store, _ = build_handler(None)

        result = await handler.handle(LoginUser(email="nobody@example.com", password="x"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        password_service.verify_password.assert_not_called()
        session_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wrong_password_has_same_error_as_unknown_email(self):
        handler, *_ = build_handler(create_user(), password_ok=False)
        unknown_handler, *_ = build_handler(None)

        wrong = await handler.handle(LoginUser(email="recruiter@example.com", password="x"))
        unknown = await unknown_handler.handle(LoginUser(email="nobody@example.com", password="x"))

        assert isinstance(wrong, Failure) and isinstance(unknown, Failure)
        assert wrong.error.code == unknown.error.code == ErrorCode.INVALID_CREDENTIALS
        assert wrong.error.message == unknown.error.message

    @pytest.mark.asyncio
    async def test_inactive_account_is_rejected_before_password_check(self):
        handler, _, password_service, session_store, _ = build_handler(
            create_user(is_active=False)
        )

        result = await handler.handle(
            LoginUser(email="recruiter@example.com", password="talenttrack")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_INACTIVE
        password_service.verify_password.assert_not_called()
        session_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_publishes_failed_event_with_reason(self):
        handler, _, _, _, event_bus = build_handler(create_user(), password_ok=False)

        await handler.handle(LoginUser(email="recruiter@example.com", password="x"))

        events = published(event_bus)
        assert [type(e) for e in events] == [UserLoginAttempted, UserLoginFailed]
        assert events[1].reason == "invalid_credentials"
        assert events[1].email == "recruiter@example.com"

    def test_password_not_in_command_repr(self):
        assert "hunter2" not in repr(LoginUser(email="a@example.com", password="hunter2"))
