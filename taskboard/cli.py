"""
Database maintenance commands.

Usage:
    python -m taskboard.cli init-db
    python -m taskboard.cli create-admin <username>

``create-admin`` is the only way a user gets the admin flag; the HTTP
surface never sets it.
"""

import argparse
import asyncio

from taskboard.config import Settings, settings
from taskboard.db import (
    close_db,
    create_engine_from_settings,
    create_session_factory,
    init_db,
)
from taskboard.db_handlers import UserDBHandler
from taskboard.utils.logger import setup_logger

logger = setup_logger("cli")


async def run_init_db(app_settings: Settings) -> None:
    engine = create_engine_from_settings(app_settings)
    try:
        await init_db(engine)
    finally:
        await close_db(engine)


async def run_create_admin(app_settings: Settings, username: str) -> None:
    engine = create_engine_from_settings(app_settings)
    try:
        await init_db(engine)
        handler = UserDBHandler(create_session_factory(engine))
        user = await handler.promote_to_admin(username)
        logger.info(f"User '{user.username}' is now an admin")
    finally:
        await close_db(engine)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Taskboard database utility")
    subparsers = parser.add_subparsers(dest="action", required=True)

    subparsers.add_parser("init-db", help="Create the users and tasks tables")

    create_admin = subparsers.add_parser(
        "create-admin", help="Create a user, or promote an existing one, with the admin flag"
    )
    create_admin.add_argument("username", help="Username to grant admin access")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.action == "init-db":
        asyncio.run(run_init_db(settings))
    elif args.action == "create-admin":
        asyncio.run(run_create_admin(settings, args.username))


if __name__ == "__main__":
    main()
