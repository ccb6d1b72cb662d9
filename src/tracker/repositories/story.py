"""Repository for Story entity: search, state updates and aggregates."""

from typing import Any, cast

from sqlalchemy import func, update
from sqlalchemy.engine import CursorResult
from sqlmodel import col, select

from src.tracker.core.clock import Clock, SystemClock, today
from src.tracker.models import REJECTED, Project, Story
from src.tracker.repositories.base import BaseRepository
from src.tracker.schemas import ProjectPoints, RejectionDate, SearchParams


class StoryRepository(BaseRepository[Story]):
    """Repository for Story entity."""

    model = Story

    async def search(self, project: Project, params: SearchParams) -> list[Story]:
        """Find stories of ``project`` matching every filter set in ``params``.

        Args:
            project: Only this project's stories are eligible
            params: title/requester match case-insensitive substrings,
                    points matches exactly

        Returns:
            Matching stories; empty when no filter is set.
        """
        if params.is_empty:
            return []

        query = select(Story).where(Story.project_id == project.id)
        if params.title is not None:
            query = query.where(col(Story.title).icontains(params.title, autoescape=True))
        if params.requester is not None:
            query = query.where(
                col(Story.requester).icontains(params.requester, autoescape=True)
            )
        if params.points is not None:
            query = query.where(Story.points == params.points)

        result = await self.session.execute(query.order_by(Story.id))
        return list(result.scalars().all())

    async def list_for_project(
        self,
        project: Project,
        cursor: str | None = None,
        limit: int = 100,
    ) -> tuple[list[Story], str | None, bool]:
        """List a project's stories, newest first, with cursor-based pagination."""
        query = select(Story).where(Story.project_id == project.id)
        return await self.paginate(query, cursor, limit, Story.id)

    async def update_state(
        self,
        story: Story,
        new_state: str,
        clock: Clock | None = None,
    ) -> int:
        """Write ``new_state`` for the story's row.

        Any string is accepted. Moving to the rejected marker stamps the
        rejection date from ``clock`` unless the row already has one; moving
        anywhere else clears it.

        Returns:
            Number of rows updated (0 if the story no longer exists).
        """
        rejected_date: Any = None
        if new_state == REJECTED:
            rejected_date = func.coalesce(Story.rejected_date, today(clock or SystemClock()))
        stmt = (
            update(Story)
            .where(col(Story.id) == story.id)
            .values(state=new_state, rejected_date=rejected_date)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return cast(CursorResult[Any], result).rowcount or 0

    async def find_project_stories(self, project: Project) -> ProjectPoints:
        """Sum the points of every story in ``project``.

        Stories without points are skipped; a project with none sums to 0.
        """
        result = await self.session.execute(
            select(func.coalesce(func.sum(Story.points), 0)).where(
                Story.project_id == project.id
            )
        )
        return ProjectPoints(name=project.name, points=result.scalar_one())

    async def rejection_histogram(self, project: Project) -> list[RejectionDate]:
        """Count the project's rejected stories per rejection date, oldest first."""
        result = await self.session.execute(
            select(Story.rejected_date, func.count(col(Story.id)))
            .where(Story.project_id == project.id, col(Story.rejected_date).is_not(None))
            .group_by(Story.rejected_date)
            .order_by(Story.rejected_date)
        )
        return [RejectionDate(date=day, count=count) for day, count in result.all()]
