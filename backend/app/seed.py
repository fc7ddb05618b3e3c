"""Seed command — create tables, bootstrap an admin and load demo data.

Usage:
    python -m app.seed --demo --admin-email admin@example.com --admin-password ...

Settings (DATABASE_URL etc.) are read the same way as the API.
"""

import argparse
import asyncio
import logging

from app.config import get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.services.seed_data import ensure_admin_account, seed_demo_data

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the inventory database.")
    parser.add_argument("--demo", action="store_true", help="load sample inventories")
    parser.add_argument("--admin-email")
    parser.add_argument("--admin-password")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> None:
    settings = get_settings()
    manager = DatabaseSessionManager(settings.database_url)
    try:
        await manager.create_all()
        async with manager.session() as db:
            if args.admin_email and args.admin_password:
                await ensure_admin_account(db, args.admin_email, args.admin_password)
            if args.demo:
                added = await seed_demo_data(db)
                logger.info("Demo data loaded" if added else "Inventories already present")
    finally:
        await manager.dispose()


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    main()
