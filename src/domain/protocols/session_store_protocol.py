"""Session store protocol.

Maps opaque session tokens to live sessions. A session exists from login until
logout; there is no expiry or refresh.
"""

from typing import Protocol

from src.domain.entities.session import Identity, Session


class SessionStoreProtocol(Protocol):
    """Session storage port.

    Implementations:
        - InMemorySessionStore: process-local dictionary
    """

    async def create(self, identity: Identity) -> Session:
        """Create a session for an identity.

        Args:
            identity: Authenticated identity.

        Returns:
            Session: New session carrying a freshly generated opaque token.
        """
        ...

    async def get(self, token: str) -> Session | None:
        """Resolve a token to its session.

        Args:
            token: Opaque token presented by the client.

        Returns:
            Session if the token is live, None otherwise.
        """
        ...

    async def revoke(self, token: str) -> Session | None:
        """Destroy the session bound to a token.

        Args:
            token: Opaque token presented by the client.

        Returns:
            The destroyed session, or None if the token was not live.
        """
        ...
