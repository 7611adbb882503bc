#!/usr/bin/env python3
"""
Savvy-Snip CLI - manage your account and snip categories.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    account      Register, sign in, sign out, delete your account
    categories   List, search, add and delete categories
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli account register --username ada --email ada@example.com
    python -m cli categories add Recipes
    python -m cli categories list --search rec
    python -m cli categories delete 1
    python -m cli account logout
"""

import sys
import argparse
from cli import account, categories, migrate
from config import load_config
from services.base import Services
from auth.factory import get_auth_manager
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Savvy-Snip - organise your snips into categories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    account.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)
            services = Services(config)

            # migrate works on the database directly; everything else goes
            # through the auth backend
            if args.command == "migrate":
                args.func(args, services.db_manager)
            else:
                args.func(args, get_auth_manager(config, services))
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
