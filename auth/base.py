"""Base interface for authentication/data backends."""

from abc import ABC, abstractmethod
from typing import List, Optional
from models.category import Category
from models.user import User


class AuthError(Exception):
    """A backend operation failed.

    Args:
        description: Human-readable explanation, shown to the user verbatim.
    """

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def __str__(self) -> str:
        return self.description


class AuthManager(ABC):
    """Abstract base class for the account and category backend.

    Every operation is a coroutine and reports failure by raising AuthError.
    Operations other than register and sign_in act on the signed-in user.
    """

    @abstractmethod
    async def register(self, username: str, email: str) -> User:
        """Create an account and sign it in.

        Raises:
            AuthError: If the account cannot be created.
        """

    @abstractmethod
    async def sign_in(self, email: str) -> User:
        """Sign in an existing account.

        Raises:
            AuthError: If no account matches.
        """

    @abstractmethod
    async def current_user(self) -> Optional[User]:
        """Return the signed-in user, or None."""

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session."""

    @abstractmethod
    async def delete_account(self) -> None:
        """Delete the signed-in account and everything it owns."""

    @abstractmethod
    async def get_categories(self) -> List[Category]:
        """Return the signed-in user's categories in backend order."""

    @abstractmethod
    async def create_category(self, name: str) -> Category:
        """Create a category for the signed-in user."""

    @abstractmethod
    async def delete_category(self, category: Category) -> None:
        """Delete one of the signed-in user's categories."""
