"""Base repository with common CRUD operations."""

from collections.abc import Iterable
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.tracker.schemas.pagination import decode_cursor, encode_cursor


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: int) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def save(self, entity: ModelType) -> ModelType:
        """Add and flush so the entity gets its generated key.

        Raises:
            IntegrityError: If the row violates a database constraint.
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def save_all(self, entities: Iterable[ModelType]) -> list[ModelType]:
        """Add and flush several entities in one round trip."""
        items = list(entities)
        self.session.add_all(items)
        await self.session.flush()
        return items

    async def flush(self) -> None:
        """Write pending changes without committing."""
        await self.session.flush()

    async def refresh(self, entity: ModelType) -> ModelType:
        """Re-read entity state from the database."""
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        """Delete entity and flush."""
        await self.session.delete(entity)
        await self.session.flush()

    async def paginate(
        self,
        query: Any,  # SelectOfScalar or Select - SQLModel/SQLAlchemy query
        cursor: str | None,
        limit: int,
        cursor_field: Any,
    ) -> tuple[list[ModelType], str | None, bool]:
        """Execute cursor-based pagination on a query.

        Args:
            query: The base SQLAlchemy query to paginate
            cursor: Optional cursor from previous page (base64-encoded)
            limit: Maximum number of items to return
            cursor_field: Column to page on, descending (e.g. id)

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        if cursor:
            try:
                cursor_str = decode_cursor(cursor)
                cursor_value: int | str
                try:
                    cursor_value = int(cursor_str)
                except ValueError:
                    cursor_value = cursor_str
                query = query.where(cursor_field < cursor_value)
            except (ValueError, TypeError):
                # Invalid cursor - ignore and start from beginning
                pass

        query = query.order_by(cursor_field.desc())

        # Fetch limit + 1 to determine if there are more results
        query = query.limit(limit + 1)

        result = await self.session.execute(query)
        items = list(result.scalars().all())

        has_more = len(items) > limit
        if has_more:
            items = items[:limit]

        next_cursor = None
        if has_more and items:
            value = getattr(items[-1], cursor_field.key)
            if value is not None:
                next_cursor = encode_cursor(str(value))

        return items, next_cursor, has_more
