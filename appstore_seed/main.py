#!/usr/bin/env python3
"""
Appstore Seed Loader

Creates the application user and loads the initial apps and users into a
fresh appstore database. Meant to run once per database instance; a second
run fails on the existing user.

Usage:
    python -m appstore_seed

Environment Variables:
    MONGO_URI: MongoDB connection string
    APPSTORE_DB_NAME: Target database (default: appstore)
    APP_USER_NAME / APP_USER_PASSWORD / APP_USER_ROLE: Application principal
    LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging
import sys

from appstore_seed.config import get_settings
from appstore_seed.database.connections import (
    close_connections,
    get_database,
    ping_server,
)
from appstore_seed.services.seed_service import SeedService

logger = logging.getLogger("appstore_seed")


def configure_logging(level: str) -> None:
    """
    Configure root logging for the seeder process.

    Raises:
        ValueError: If level is not a logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid LOG_LEVEL: {level!r}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def run() -> dict:
    """Connect, seed and report. Errors propagate to the caller."""
    await ping_server()
    logger.info("Connected to MongoDB")

    service = SeedService(await get_database())
    stats = await service.seed()

    logger.info(
        f"Seed complete: user '{stats['principal']}', "
        f"{stats['apps_inserted']} apps, {stats['users_inserted']} users "
        f"in {stats['elapsed_seconds']}s"
    )

    present = await service.verify()
    logger.info(f"apps: {present['apps']} | users: {present['users']}")
    return stats


async def main() -> int:
    """Main entry point. Returns the process exit status."""
    try:
        await run()
    except Exception as e:
        if e.__cause__ is not None:
            # Driver error behind a DuplicateEntityError
            logger.error(f"Seeding failed: {e} ({type(e.__cause__).__name__}: {e.__cause__})")
        else:
            logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        await close_connections()
    return 0


def cli():
    """Console script entry point."""
    try:
        settings = get_settings()
        configure_logging(settings.log_level)
    except ValueError as e:
        logging.basicConfig(format="%(levelname)s | %(message)s")
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logger.info("=" * 60)
    logger.info("Appstore Seed Loader")
    logger.info(f"Target database: {settings.appstore_db_name}")
    logger.info("=" * 60)

    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
