"""Login user handler.

Flow:
1. Emit UserLoginAttempted event
2. Find user by email
3. Check account exists
4. Check account active
5. Verify password
6. Create session for the user's identity
7. Emit UserLoginSucceeded event
8. Return Success(Session)

On failure:
- Emit UserLoginFailed event
- Return Failure(AuthenticationError)

Unknown email and wrong password produce the same error so the response does
not reveal which accounts exist.
"""

from src.application.commands.session_commands import LoginUser
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Identity, Session
from src.domain.events import UserLoginAttempted, UserLoginFailed, UserLoginSucceeded
from src.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    SessionStoreProtocol,
    UserRepository,
)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginUserHandler:
    """Handler for the LoginUser command.

    Application layer only: repositories and services are injected via
    protocols.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        session_store: SessionStoreProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._session_store = session_store
        self._event_bus = event_bus

    async def handle(self, cmd: LoginUser) -> Result[Session, AuthenticationError]:
        """Handle login command.

        Args:
            cmd: LoginUser command (email and password).

        Returns:
            Success(Session) with a new opaque token.
            Failure(AuthenticationError) with INVALID_CREDENTIALS or
            ACCOUNT_INACTIVE.

        Side Effects:
            - Publishes UserLoginAttempted (always).
            - Publishes UserLoginSucceeded or UserLoginFailed.
            - Stores a new session on success.
        """
        await self._event_bus.publish(UserLoginAttempted(email=cmd.email))

        user = await self._user_repo.find_by_email(cmd.email)

        if user is None:
            return await self._fail(
                cmd.email, ErrorCode.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE
            )

        if not user.can_login():
            return await self._fail(
                cmd.email, ErrorCode.ACCOUNT_INACTIVE, "Account is inactive"
            )

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            return await self._fail(
                cmd.email, ErrorCode.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE
            )

        session = await self._session_store.create(Identity.from_user(user))

        await self._event_bus.publish(
            UserLoginSucceeded(
                user_id=user.id,
                email=user.email,
                role=user.role.value,
                session_id=session.id,
            )
        )

        return Success(value=session)

    async def _fail(
        self,
        email: str,
        code: ErrorCode,
        message: str,
    ) -> Failure[AuthenticationError]:
        """Publish UserLoginFailed and build the failure result."""
        await self._event_bus.publish(UserLoginFailed(email=email, reason=code.value))
        return Failure(error=AuthenticationError(code=code, message=message))
