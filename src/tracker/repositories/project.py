"""Repository for Project entity."""

from sqlmodel import select

from src.tracker.models import Project
from src.tracker.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_all(
        self,
        cursor: str | None = None,
        limit: int = 100,
    ) -> tuple[list[Project], str | None, bool]:
        """List all projects, newest first, with cursor-based pagination."""
        query = select(Project)
        return await self.paginate(query, cursor, limit, Project.id)

    async def get_by_name(self, name: str) -> Project | None:
        """Get the first project with this name (names are not unique)."""
        result = await self.session.execute(
            select(Project).where(Project.name == name).order_by(Project.id).limit(1)
        )
        return result.scalar_one_or_none()
