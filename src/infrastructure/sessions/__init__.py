"""Session storage adapters."""

from src.infrastructure.sessions.in_memory_session_store import InMemorySessionStore

__all__ = [
    "InMemorySessionStore",
]
