"""SQLite-backed auth backend for a single local installation.

Accounts are identified by email address. Credentials are not stored or
checked here; a hosted identity provider is expected to own them.
"""

import asyncio
import sqlite3
from typing import List, Optional
from auth.base import AuthError, AuthManager
from models.category import Category
from models.user import User
from logger import get_logger

logger = get_logger(__name__)


class LocalAuthManager(AuthManager):
    """Auth backend storing users, categories and the session in SQLite.

    Blocking database calls run in a worker thread so the event loop that
    owns the view models keeps responding.

    Args:
        services: Services container (users, categories, sessions).
    """

    def __init__(self, services):
        self.services = services

    async def _run(self, func, *args):
        try:
            return await asyncio.to_thread(func, *args)
        except sqlite3.Error as e:
            raise AuthError(f"Database error: {e}") from e

    def _require_user_id(self) -> int:
        user_id = self.services.sessions.current_user_id()
        if user_id is None:
            raise AuthError("No user is signed in.")
        return user_id

    async def register(self, username: str, email: str) -> User:
        def _register():
            if self.services.users.find_by_email(email):
                raise AuthError("An account with this email already exists.")
            user = self.services.users.create(username, email)
            self.services.sessions.start(user.id)
            return user

        user = await self._run(_register)
        logger.info(f"Registered user {user.email} (ID: {user.id})")
        return user

    async def sign_in(self, email: str) -> User:
        def _sign_in():
            user = self.services.users.find_by_email(email)
            if user is None:
                raise AuthError(f"No account found for {email.strip()}.")
            self.services.sessions.start(user.id)
            return user

        user = await self._run(_sign_in)
        logger.info(f"Signed in {user.email}")
        return user

    async def current_user(self) -> Optional[User]:
        def _current_user():
            user_id = self.services.sessions.current_user_id()
            return self.services.users.find(user_id) if user_id is not None else None

        return await self._run(_current_user)

    async def sign_out(self) -> None:
        if await self._run(self.services.sessions.end):
            logger.info("Signed out")

    async def delete_account(self) -> None:
        def _delete_account():
            user_id = self._require_user_id()
            # Categories and the session go with the user via ON DELETE CASCADE
            self.services.users.delete(user_id)
            return user_id

        user_id = await self._run(_delete_account)
        logger.info(f"Deleted account {user_id}")

    async def get_categories(self) -> List[Category]:
        def _get_categories():
            return self.services.categories.find_all_for_user(self._require_user_id())

        return await self._run(_get_categories)

    async def create_category(self, name: str) -> Category:
        def _create_category():
            user_id = self._require_user_id()
            if self.services.categories.find_by_name(user_id, name):
                raise AuthError(f"A category named '{name}' already exists.")
            return self.services.categories.create(user_id, name)

        category = await self._run(_create_category)
        logger.info(f"Created category '{category.name}' (ID: {category.id})")
        return category

    async def delete_category(self, category: Category) -> None:
        def _delete_category():
            user_id = self._require_user_id()
            stored = self.services.categories.find(category.id)
            if stored is None or stored.user_id != user_id:
                raise AuthError("Category not found.")
            self.services.categories.delete(category.id)

        await self._run(_delete_category)
        logger.info(f"Deleted category '{category.name}' (ID: {category.id})")
