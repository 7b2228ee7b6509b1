"""Demo user directory.

One account per role, matching the accounts offered on the TalentTrack login
screen. All demo accounts share ``settings.demo_user_password``.
"""

from dataclasses import dataclass

from uuid_extensions import uuid7

from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class DemoAccount:
    """Seed data for one demo user."""

    name: str
    email: str
    role: UserRole
    department: str | None = None


DEMO_ACCOUNTS: tuple[DemoAccount, ...] = (
    DemoAccount(name="Admin User", email="admin@example.com", role=UserRole.ADMIN),
    DemoAccount(
        name="Recruiter User",
        email="recruiter@example.com",
        role=UserRole.RECRUITER,
        department="HR",
    ),
    DemoAccount(
        name="Manager User",
        email="manager@example.com",
        role=UserRole.HIRING_MANAGER,
        department="Engineering",
    ),
    DemoAccount(name="Viewer User", email="viewer@example.com", role=UserRole.VIEWER),
)


def build_demo_users(
    password: str,
    password_service: PasswordHashingProtocol,
) -> list[User]:
    """Create User entities for every demo account.

    Args:
        password: Plaintext password shared by the demo accounts.
        password_service: Hasher used for the stored password hash.

    Returns:
        list[User]: One active user per demo account.
    """
    password_hash = password_service.hash_password(password)
    return [
        User(
            id=uuid7(),
            name=account.name,
            email=account.email,
            role=account.role,
            department=account.department,
            password_hash=password_hash,
        )
        for account in DEMO_ACCOUNTS
    ]
