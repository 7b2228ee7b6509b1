"""Port for one-way password hashing."""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Hashes stored passwords and checks login attempts against them."""

    def hash_password(self, password: str) -> str:
        """Salted hash of `password`; two calls never return the same string."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """True when `password` matches. A malformed hash is a mismatch, not an error."""
        ...
