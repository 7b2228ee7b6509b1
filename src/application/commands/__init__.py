"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (LoginUser, LogoutUser).

Each command has a corresponding handler that executes it and returns a
Result.
"""

from src.application.commands.session_commands import LoginUser, LogoutUser

__all__ = [
    # Session commands
    "LoginUser",
    "LogoutUser",
]
