"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol

# Storage protocols
from src.domain.protocols.session_store_protocol import SessionStoreProtocol
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "SessionStoreProtocol",
    "UserRepository",
]
