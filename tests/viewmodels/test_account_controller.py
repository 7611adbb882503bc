from unittest.mock import AsyncMock

import pytest

from models.user import User
from viewmodels.account import AccountController, AccountState
from viewmodels.state import DEFAULT_ERROR_MESSAGE


class TestRegister:
    """Tests for AccountController.register."""

    @pytest.mark.asyncio
    async def test_register_success(self, fake_auth):
        """Test that a valid form creates and publishes the user."""
        controller = AccountController(fake_auth)

        user = await controller.register(" ada ", "Ada@Example.com")

        assert user == User(id=1, username="ada", email="ada@example.com")
        assert controller.user == user
        assert controller.has_error is False

    @pytest.mark.asyncio
    async def test_blank_username_is_rejected_locally(self, fake_auth):
        """Test that validation failures never reach the backend."""
        controller = AccountController(fake_auth)

        user = await controller.register("   ", "ada@example.com")

        assert user is None
        assert fake_auth.calls == []
        assert controller.has_error is True
        assert controller.error_message == "Error registering user: Username cannot be empty"

    @pytest.mark.asyncio
    async def test_invalid_email_is_rejected_locally(self, fake_auth):
        """Test that an email without a domain is rejected."""
        controller = AccountController(fake_auth)

        user = await controller.register("ada", "ada")

        assert user is None
        assert fake_auth.calls == []
        assert controller.error_message == "Error registering user: Email address is invalid"

    @pytest.mark.asyncio
    async def test_backend_failure(self, fake_auth):
        """Test that a backend error is reported with the registration prefix."""
        fake_auth.fail("register", "An account with this email already exists.")
        controller = AccountController(fake_auth)

        user = await controller.register("ada", "ada@example.com")

        assert user is None
        assert controller.user is None
        assert controller.error_message == (
            "Error registering user: An account with this email already exists."
        )

    @pytest.mark.asyncio
    async def test_backend_returning_no_user(self, fake_auth):
        """Test that a missing user from the backend counts as a failure."""
        fake_auth.register = AsyncMock(return_value=None)
        controller = AccountController(fake_auth)

        user = await controller.register("ada", "ada@example.com")

        assert user is None
        assert controller.has_error is True
        assert controller.error_message == (
            "Error registering user: User credentials are nil."
        )


class TestSignIn:
    """Tests for AccountController.sign_in."""

    @pytest.mark.asyncio
    async def test_sign_in_success_clears_previous_error(self, fake_auth):
        """Test that a successful sign-in publishes the user and hides the alert."""
        controller = AccountController(fake_auth)
        controller.store.update(has_error=True, error_message="Error signing in: x")

        user = await controller.sign_in("ada@example.com")

        assert controller.user == user
        assert controller.has_error is False

    @pytest.mark.asyncio
    async def test_sign_in_failure(self, fake_auth):
        """Test that an unknown account is reported."""
        fake_auth.fail("sign_in", "No account found for bob@example.com.")
        controller = AccountController(fake_auth)

        user = await controller.sign_in("bob@example.com")

        assert user is None
        assert controller.error_message == (
            "Error signing in: No account found for bob@example.com."
        )


class TestAccountReset:
    """Tests for reset and dismiss_error."""

    @pytest.mark.asyncio
    async def test_reset(self, fake_auth):
        """Test that reset forgets the user and the error together."""
        controller = AccountController(fake_auth)
        await controller.sign_in("ada@example.com")
        controller.store.update(has_error=True, error_message="boom")

        controller.reset()

        assert controller.state == AccountState()
        assert controller.error_message == DEFAULT_ERROR_MESSAGE

    def test_dismiss_error(self, fake_auth):
        """Test that dismissing keeps the message."""
        controller = AccountController(fake_auth)
        controller.store.update(has_error=True, error_message="boom")

        controller.dismiss_error()

        assert controller.has_error is False
        assert controller.error_message == "boom"
