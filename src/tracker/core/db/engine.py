"""Database engine management."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.tracker.core.config import get_settings

_engine: AsyncEngine | None = None


def _unicode_lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def configure_sqlite_connection(dbapi_connection: Any, connection_record: Any) -> None:
    """Per-connection SQLite setup.

    Foreign keys are off by default, and the built-in lower() only folds
    ASCII, which would make case-insensitive search miss accented text.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine, configuring SQLite connections on connect.

    Args:
        url: SQLAlchemy database URL (async driver).
        **kwargs: Passed through to ``create_async_engine`` (poolclass, echo, ...).
    """
    engine = create_async_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", configure_sqlite_connection)
    return engine


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = build_engine(settings.database_url, echo=settings.database_echo)
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
