"""Observable state container shared by the view models."""

from dataclasses import replace
from typing import Callable, Generic, List, TypeVar
from logger import get_logger

logger = get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred. Please try again."

S = TypeVar("S")


class StateStore(Generic[S]):
    """Holds an immutable state snapshot and notifies subscribers on change.

    The snapshot is a frozen dataclass. ``update`` swaps in a complete new
    snapshot before anyone is notified, so observers never see a change that
    is only half applied. Updates are expected on the event loop thread that
    owns the view model; subscribers are called on that thread.

    Args:
        initial: The starting snapshot.
    """

    def __init__(self, initial: S):
        self._state = initial
        self._subscribers: List[Callable[[S], None]] = []

    @property
    def state(self) -> S:
        return self._state

    def subscribe(self, callback: Callable[[S], None]) -> Callable[[], None]:
        """Register a callback for every new snapshot.

        Args:
            callback: Called with the new snapshot after each update.

        Returns:
            A function that removes the callback.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def update(self, **changes) -> S:
        """Apply changes as one new snapshot and notify subscribers once.

        Returns:
            The new snapshot.
        """
        new_state = replace(self._state, **changes)
        self._state = new_state
        # A subscriber may update again; everyone still sees this snapshot
        for callback in list(self._subscribers):
            try:
                callback(new_state)
            except Exception:
                logger.exception("State subscriber failed")
        return new_state
