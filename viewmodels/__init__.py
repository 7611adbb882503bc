"""Observable view state and the operations that change it."""

from viewmodels.state import DEFAULT_ERROR_MESSAGE, StateStore
from viewmodels.categories import CategoryStateController, ControllerState
from viewmodels.account import AccountController, AccountState

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "StateStore",
    "CategoryStateController",
    "ControllerState",
    "AccountController",
    "AccountState",
]
