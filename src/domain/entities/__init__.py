"""Directory users and the sessions they sign in to."""

from src.domain.entities.session import Identity, Session
from src.domain.entities.user import User

__all__ = ["Identity", "Session", "User"]
