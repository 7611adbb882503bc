"""View model behind the create-account and sign-in forms."""

from dataclasses import dataclass
from typing import Callable, Optional
from pydantic import ValidationError
from auth.base import AuthManager
from models.registration import RegistrationForm
from models.user import User
from viewmodels.state import DEFAULT_ERROR_MESSAGE, StateStore
from logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccountState:
    user: Optional[User] = None
    has_error: bool = False
    error_message: str = DEFAULT_ERROR_MESSAGE


class AccountController:
    """Registers and signs in users, publishing the outcome as AccountState.

    Like the category controller, failures end up in state and are never
    raised to the caller.
    """

    def __init__(
        self,
        auth_manager: AuthManager,
        store: Optional[StateStore[AccountState]] = None,
    ):
        self.auth_manager = auth_manager
        self.store = store or StateStore(AccountState())

    @property
    def state(self) -> AccountState:
        return self.store.state

    @property
    def user(self) -> Optional[User]:
        return self.store.state.user

    @property
    def has_error(self) -> bool:
        return self.store.state.has_error

    @property
    def error_message(self) -> str:
        return self.store.state.error_message

    def subscribe(self, callback: Callable[[AccountState], None]):
        return self.store.subscribe(callback)

    async def register(self, username: str, email: str) -> Optional[User]:
        """Validate the form and create an account.

        Returns:
            The new user, or None if validation or the backend failed.
        """
        try:
            form = RegistrationForm(username=username, email=email)
        except ValidationError as e:
            self._fail("Error registering user", RegistrationForm.first_error(e))
            return None

        try:
            user = await self.auth_manager.register(form.username, form.email)
        except Exception as e:
            self._fail("Error registering user", e)
            return None

        if user is None:
            self._fail("Error registering user", "User credentials are nil.")
            return None

        self.store.update(user=user, has_error=False)
        return user

    async def sign_in(self, email: str) -> Optional[User]:
        """Sign in an existing account by email."""
        try:
            user = await self.auth_manager.sign_in(email)
        except Exception as e:
            self._fail("Error signing in", e)
            return None

        self.store.update(user=user, has_error=False)
        return user

    def reset(self) -> None:
        self.store.update(user=None, has_error=False, error_message=DEFAULT_ERROR_MESSAGE)

    def dismiss_error(self) -> None:
        self.store.update(has_error=False)

    def _fail(self, prefix: str, error) -> None:
        message = f"{prefix}: {error}"
        logger.error(message)
        self.store.update(has_error=True, error_message=message)
