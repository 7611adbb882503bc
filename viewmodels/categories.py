"""View model behind the category list screen.

The controller owns a ControllerState snapshot and is the only thing that
changes it. Every backend failure is caught here, logged, and turned into
``has_error``/``error_message`` for the view to show; nothing is raised to
the caller.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, List, Optional, Set, Tuple
from auth.base import AuthManager
from models.category import Category
from viewmodels.state import DEFAULT_ERROR_MESSAGE, StateStore
from logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ControllerState:
    """Snapshot observed by the category screen.

    Attributes:
        categories: Categories in the order the backend returned them.
        has_error: Whether an error alert should be shown.
        error_message: Text for the alert; describes the latest failure.
    """

    categories: Tuple[Category, ...] = ()
    has_error: bool = False
    error_message: str = DEFAULT_ERROR_MESSAGE


class CategoryStateController:
    """Mediates category list, sign-out and account deletion for one screen.

    ``fetch_categories`` and ``add_category`` are coroutines for callers that
    want to await the refresh. ``delete_category``, ``log_out`` and
    ``delete_account`` are fired from UI actions: they schedule a task on the
    running loop and return it immediately, so they must be called from code
    running inside that loop; otherwise they raise RuntimeError before any
    work starts. Tasks are not ordered against each other or cancelled;
    whichever finishes last decides the visible list.

    Args:
        auth_manager: Backend that owns accounts and categories.
        store: Optional pre-built state store.
    """

    def __init__(
        self,
        auth_manager: AuthManager,
        store: Optional[StateStore[ControllerState]] = None,
    ):
        self.auth_manager = auth_manager
        self.store = store or StateStore(ControllerState())
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> ControllerState:
        return self.store.state

    @property
    def categories(self) -> List[Category]:
        return list(self.store.state.categories)

    @property
    def has_error(self) -> bool:
        return self.store.state.has_error

    @property
    def error_message(self) -> str:
        return self.store.state.error_message

    def subscribe(self, callback: Callable[[ControllerState], None]):
        """Observe state changes. Returns an unsubscribe function."""
        return self.store.subscribe(callback)

    async def fetch_categories(self) -> bool:
        """Replace the category list with the backend's current list.

        On failure the previous list stays visible.

        Returns:
            True on success, False if the backend call failed.
        """
        try:
            categories = await self.auth_manager.get_categories()
        except Exception as e:
            self._fail("Error fetching categories", e)
            return False

        self.store.update(categories=tuple(categories))
        return True

    def delete_category(self, index: int) -> Optional[asyncio.Task]:
        """Delete the category at a list position, then refetch the list.

        The position is resolved against the list as it is right now. A stale
        position outside the list is ignored.

        Args:
            index: Position in ``categories``.

        Returns:
            The scheduled task (resolving to True/False), or None if the
            position was out of range.

        Raises:
            RuntimeError: If called without a running event loop.
        """
        categories = self.store.state.categories
        if not 0 <= index < len(categories):
            return None

        return self._spawn(self._delete_category, categories[index])

    async def _delete_category(self, category: Category) -> bool:
        try:
            await self.auth_manager.delete_category(category)
        except Exception as e:
            self._fail("Error deleting category", e)
            return False

        # The backend's list is authoritative; never splice locally
        return await self.fetch_categories()

    async def add_category(self, name: str) -> bool:
        """Create a category, then refetch the list.

        Returns:
            True if the category was created and the list refreshed.
        """
        name = name.strip()
        if not name:
            self._fail("Error adding category", "Category name cannot be empty.")
            return False

        try:
            await self.auth_manager.create_category(name)
        except Exception as e:
            self._fail("Error adding category", e)
            return False

        return await self.fetch_categories()

    def log_out(self) -> asyncio.Task:
        """Sign out and, on success, clear all state."""
        return self._spawn(self._log_out)

    async def _log_out(self) -> bool:
        try:
            await self.auth_manager.sign_out()
        except Exception as e:
            self._fail("Error logging out", e)
            return False

        # Nothing from this account may survive into the next sign-in
        self.reset()
        return True

    def delete_account(self) -> asyncio.Task:
        """Delete the signed-in account.

        Success does not touch state. Callers must follow a successful
        deletion with ``log_out()``, which clears the list.
        """
        return self._spawn(self._delete_account)

    async def _delete_account(self) -> bool:
        try:
            await self.auth_manager.delete_account()
        except Exception as e:
            self._fail("Error deleting account", e)
            return False
        return True

    def filtered_categories(self, search_text: str) -> List[Category]:
        """Categories whose name contains search_text, ignoring case.

        An empty search returns every category. Order is preserved and state
        is not modified.
        """
        categories = self.store.state.categories
        if not search_text:
            return list(categories)
        return [category for category in categories if category.matches(search_text)]

    def reset(self) -> None:
        """Return to a clean slate in a single update."""
        self.store.update(
            categories=(),
            has_error=False,
            error_message=DEFAULT_ERROR_MESSAGE,
        )

    def dismiss_error(self) -> None:
        """Hide the error alert, keeping the last message."""
        self.store.update(has_error=False)

    async def wait_idle(self) -> None:
        """Wait until every scheduled operation has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _spawn(self, coro_fn, *args) -> asyncio.Task:
        # Look up the loop first so a missing loop leaves no orphaned coroutine
        loop = asyncio.get_running_loop()
        task = loop.create_task(coro_fn(*args))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _fail(self, prefix: str, error) -> None:
        message = f"{prefix}: {error}"
        logger.error(message)
        self.store.update(has_error=True, error_message=message)
