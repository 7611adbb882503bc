"""Helper utilities for tests."""

import asyncio
from pathlib import Path
import sqlite3
from typing import Dict, List, Optional

from auth.base import AuthError, AuthManager
from models.category import Category
from models.user import User


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        conn.executescript(migration_file.read_text())

    conn.commit()


def make_categories(*names: str) -> List[Category]:
    """Build categories with ids 1..n in the given order."""
    return [Category(id=i, name=name) for i, name in enumerate(names, start=1)]


class FakeAuthManager(AuthManager):
    """In-memory auth backend with scripted results.

    - ``categories`` is what get_categories returns unless ``responses`` holds
      queued results, which are consumed first.
    - ``fail(op, description)`` makes the next call to ``op`` raise AuthError.
    - ``hold(op)`` makes calls to ``op`` wait until the returned event is set.
    - ``calls`` records every operation name in call order.
    """

    def __init__(self, categories: Optional[List[Category]] = None):
        self.categories: List[Category] = list(categories or [])
        self.responses: List[List[Category]] = []
        self.calls: List[str] = []
        self.user: Optional[User] = None
        self._failures: Dict[str, List[Exception]] = {}
        self._gates: Dict[str, asyncio.Event] = {}

    def fail(self, op: str, description: str, error_class=AuthError) -> None:
        self._failures.setdefault(op, []).append(error_class(description))

    def hold(self, op: str) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates[op] = gate
        return gate

    def call_count(self, op: str) -> int:
        return self.calls.count(op)

    async def _enter(self, op: str) -> None:
        self.calls.append(op)
        gate = self._gates.get(op)
        if gate is not None:
            await gate.wait()
        pending = self._failures.get(op)
        if pending:
            raise pending.pop(0)

    async def register(self, username: str, email: str) -> User:
        await self._enter("register")
        self.user = User(id=1, username=username, email=email)
        return self.user

    async def sign_in(self, email: str) -> User:
        await self._enter("sign_in")
        self.user = User(id=1, username=email.split("@")[0], email=email)
        return self.user

    async def current_user(self) -> Optional[User]:
        await self._enter("current_user")
        return self.user

    async def sign_out(self) -> None:
        await self._enter("sign_out")
        self.user = None

    async def delete_account(self) -> None:
        await self._enter("delete_account")
        self.categories = []

    async def get_categories(self) -> List[Category]:
        await self._enter("get_categories")
        if self.responses:
            return list(self.responses.pop(0))
        return list(self.categories)

    async def create_category(self, name: str) -> Category:
        await self._enter("create_category")
        next_id = max((c.id for c in self.categories), default=0) + 1
        category = Category(id=next_id, name=name)
        self.categories.append(category)
        return category

    async def delete_category(self, category: Category) -> None:
        await self._enter("delete_category")
        self.categories = [c for c in self.categories if c.id != category.id]
