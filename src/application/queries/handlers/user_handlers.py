"""User directory query handlers."""

from src.application.queries.user_queries import ListUsers
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities.user import User
from src.domain.protocols import UserRepository


class ListUsersHandler:
    """Handler for ListUsers.

    Authorization happens at the route; the handler only reads the directory.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: ListUsers) -> Result[list[User], DomainError]:
        """Return every directory user in directory order."""
        return Success(value=await self._user_repo.list_all())
