"""Database utilities - engine, session, migrations."""

from src.tracker.core.db.engine import build_engine, dispose_engine, get_engine
from src.tracker.core.db.migrations import run_migrations_async, run_migrations_sync
from src.tracker.core.db.session import get_session

__all__ = [
    # Engine
    "build_engine",
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
