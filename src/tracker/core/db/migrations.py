"""Reusable migration runner for both production and tests."""

import asyncio

from alembic.config import Config

from alembic import command


def run_migrations_sync(config_path: str = "alembic.ini", revision: str = "head") -> None:
    """Run Alembic migrations synchronously.

    Args:
        config_path: Path to alembic.ini.
        revision: Target revision.
    """
    alembic_cfg = Config(config_path)
    command.upgrade(alembic_cfg, revision)


async def run_migrations_async(config_path: str = "alembic.ini", revision: str = "head") -> None:
    """Run Alembic migrations from async context.

    env.py builds its own sync engine, so it runs in a worker thread to keep
    it off the event loop.
    """
    await asyncio.to_thread(run_migrations_sync, config_path, revision)
