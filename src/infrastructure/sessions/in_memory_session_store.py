"""In-memory session store.

Concrete SessionStoreProtocol implementation using a dict keyed by token.
Sessions are lost on restart and are not shared between processes.
"""

import secrets

from uuid_extensions import uuid7

from src.domain.entities.session import Identity, Session

TOKEN_BYTES = 32


class InMemorySessionStore:
    """In-memory dict storage for sessions.

    Tokens come from ``secrets.token_urlsafe`` and carry no information about
    the identity they map to.

    Usage:
        store = InMemorySessionStore()
        session = await store.create(Identity.from_user(user))
        await store.get(session.token)
        await store.revoke(session.token)
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    async def create(self, identity: Identity) -> Session:
        """Create and store a session for an identity."""
        token = secrets.token_urlsafe(TOKEN_BYTES)
        while token in self._sessions:
            token = secrets.token_urlsafe(TOKEN_BYTES)
        session = Session(id=uuid7(), token=token, identity=identity)
        self._sessions[token] = session
        return session

    async def get(self, token: str) -> Session | None:
        """Resolve a token, None when unknown or empty."""
        if not token:
            return None
        return self._sessions.get(token)

    async def revoke(self, token: str) -> Session | None:
        """Remove and return the session bound to a token."""
        if not token:
            return None
        return self._sessions.pop(token, None)
