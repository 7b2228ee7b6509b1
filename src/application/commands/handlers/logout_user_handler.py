"""Logout user handler.

Flow:
1. Revoke the session bound to the token
2. Emit UserLogoutSucceeded event
3. Return Success(LogoutResponse)

A token with no live session emits UserLogoutFailed and returns
Failure(NotFoundError).
"""

from dataclasses import dataclass

from src.application.commands.session_commands import LogoutUser
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.events import UserLogoutFailed, UserLogoutSucceeded
from src.domain.protocols import EventBusProtocol, SessionStoreProtocol


@dataclass
class LogoutResponse:
    """Response data for successful logout."""

    message: str = "Successfully logged out."


class LogoutUserHandler:
    """Handler for the LogoutUser command."""

    def __init__(
        self,
        session_store: SessionStoreProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._session_store = session_store
        self._event_bus = event_bus

    async def handle(self, cmd: LogoutUser) -> Result[LogoutResponse, NotFoundError]:
        """Handle logout command.

        Args:
            cmd: LogoutUser command with the session token.

        Returns:
            Success(LogoutResponse) when a session was destroyed.
            Failure(NotFoundError) when the token was not live.
        """
        session = await self._session_store.revoke(cmd.token)

        if session is None:
            await self._event_bus.publish(
                UserLogoutFailed(reason=ErrorCode.SESSION_NOT_FOUND.value)
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.SESSION_NOT_FOUND,
                    message="Session not found",
                    resource_type="Session",
                    resource_id="current",
                )
            )

        await self._event_bus.publish(
            UserLogoutSucceeded(
                user_id=session.identity.user_id,
                session_id=session.id,
            )
        )
        return Success(value=LogoutResponse())
