#!/usr/bin/env python3

import asyncio
import sys
from viewmodels.categories import CategoryStateController
from logger import get_logger

logger = get_logger(__name__)


def _exit_on_error(controller):
    """Report the controller's error alert and exit, if one is showing."""
    if controller.has_error:
        logger.error(controller.error_message)
        controller.dismiss_error()
        sys.exit(1)


def cmd_list(args, auth_manager):
    """List the signed-in user's categories, optionally filtered."""
    controller = CategoryStateController(auth_manager)
    asyncio.run(controller.fetch_categories())
    _exit_on_error(controller)

    categories = controller.filtered_categories(args.search or "")
    if not categories:
        if args.search:
            logger.info(f"No categories matching '{args.search}'.")
        else:
            logger.info("No categories found.")
        return

    logger.info("\nYour Categories:")
    logger.info("=" * 80)
    # Positions refer to the unfiltered list so they can be passed to delete
    positions = {id(category): i for i, category in enumerate(controller.categories)}
    for category in categories:
        logger.info(f"{positions[id(category)] + 1:>3}. {category.name}")

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_add(args, auth_manager):
    """Add a new category."""
    controller = CategoryStateController(auth_manager)

    async def _add():
        await controller.fetch_categories()
        if controller.has_error:
            return
        await controller.add_category(args.name)

    asyncio.run(_add())
    _exit_on_error(controller)

    logger.info(f"✓ Category '{args.name.strip()}' added.")
    logger.info(f"Total categories: {len(controller.categories)}")


def cmd_delete(args, auth_manager):
    """Delete a category by its position in the list."""
    controller = CategoryStateController(auth_manager)

    async def _delete():
        await controller.fetch_categories()
        if controller.has_error:
            return None

        categories = controller.categories
        index = args.position - 1
        if not 0 <= index < len(categories):
            return None
        category = categories[index]

        if not args.yes:
            confirm = (
                input(f"\nDelete category '{category.name}'? (yes/no): ")
                .strip()
                .lower()
            )
            if confirm != "yes":
                logger.info("Deletion cancelled.")
                return None

        task = controller.delete_category(index)
        if task is not None:
            await task
        return category

    category = asyncio.run(_delete())
    _exit_on_error(controller)

    if category is None:
        if not 1 <= args.position <= len(controller.categories):
            logger.error(f"No category at position {args.position}.")
            sys.exit(1)
        return

    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="List, search, add and delete your categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    list_parser = categories_subparsers.add_parser("list", help="List categories")
    list_parser.add_argument(
        "--search",
        "-s",
        help="Only show categories whose name contains this text (case-insensitive)",
    )
    list_parser.set_defaults(func=cmd_list)

    add_parser = categories_subparsers.add_parser("add", help="Add a new category")
    add_parser.add_argument("name", help="Name of the new category")
    add_parser.set_defaults(func=cmd_add)

    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by its list position"
    )
    delete_parser.add_argument(
        "position",
        type=int,
        help="Position shown by 'categories list' (starting at 1)",
    )
    delete_parser.add_argument(
        "--yes", "-y", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)
