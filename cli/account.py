#!/usr/bin/env python3

import asyncio
import sys
from viewmodels.account import AccountController
from viewmodels.categories import CategoryStateController
from logger import get_logger

logger = get_logger(__name__)


def cmd_register(args, auth_manager):
    """Interactively create a new account."""
    print("\nCreate Account")
    print("=" * 80)

    username = args.username or input("Username: ").strip()
    email = args.email or input("Email: ").strip()

    controller = AccountController(auth_manager)
    user = asyncio.run(controller.register(username, email))

    if user is None:
        logger.error(controller.error_message)
        sys.exit(1)

    logger.info(f"\n✓ Account created for {user.username} <{user.email}>")
    logger.info("You are now signed in.")


def cmd_login(args, auth_manager):
    """Sign in with an existing account."""
    controller = AccountController(auth_manager)
    user = asyncio.run(controller.sign_in(args.email))

    if user is None:
        logger.error(controller.error_message)
        sys.exit(1)

    logger.info(f"✓ Signed in as {user.username} <{user.email}>")


def cmd_logout(args, auth_manager):
    """Sign out of the current account."""
    controller = CategoryStateController(auth_manager)

    async def _logout():
        return await controller.log_out()

    if not asyncio.run(_logout()):
        logger.error(controller.error_message)
        sys.exit(1)

    logger.info("✓ Signed out.")


def cmd_whoami(args, auth_manager):
    """Show the signed-in account."""
    user = asyncio.run(auth_manager.current_user())

    if user is None:
        logger.info("Not signed in.")
        return

    logger.info(f"ID: {user.id}")
    logger.info(f"Username: {user.username}")
    logger.info(f"Email: {user.email}")


def cmd_delete(args, auth_manager):
    """Delete the signed-in account and all of its categories."""
    if not args.yes:
        confirm = (
            input(
                "\nThis deletes your account and all of its categories. "
                "Continue? (yes/no): "
            )
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    controller = CategoryStateController(auth_manager)

    async def _delete():
        if not await controller.delete_account():
            return False
        # A deleted account is always followed by a sign-out, which clears state
        return await controller.log_out()

    if not asyncio.run(_delete()):
        logger.error(controller.error_message)
        sys.exit(1)

    logger.info("✓ Account deleted.")


def setup_parser(subparsers):
    """Setup account subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "account",
        help="Manage your account",
        description="Register, sign in, sign out and delete your account",
    )

    account_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    register_parser = account_subparsers.add_parser(
        "register", help="Create a new account"
    )
    register_parser.add_argument("--username", help="Display name")
    register_parser.add_argument("--email", help="Email address")
    register_parser.set_defaults(func=cmd_register)

    login_parser = account_subparsers.add_parser("login", help="Sign in")
    login_parser.add_argument("email", help="Email address of the account")
    login_parser.set_defaults(func=cmd_login)

    logout_parser = account_subparsers.add_parser("logout", help="Sign out")
    logout_parser.set_defaults(func=cmd_logout)

    whoami_parser = account_subparsers.add_parser(
        "whoami", help="Show the signed-in account"
    )
    whoami_parser.set_defaults(func=cmd_whoami)

    delete_parser = account_subparsers.add_parser(
        "delete", help="Delete your account"
    )
    delete_parser.add_argument(
        "--yes", "-y", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)
