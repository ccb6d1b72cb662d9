"""Story service - story lifecycle, search and reporting for one session."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.clock import Clock, SystemClock, today
from src.tracker.core.exceptions import NotFoundError
from src.tracker.core.logging import bind_project_context, get_logger
from src.tracker.models import REJECTED, Project, Story
from src.tracker.repositories import ProjectRepository, StoryRepository
from src.tracker.schemas import (
    PaginatedResponse,
    ProjectPoints,
    RejectionDate,
    SearchParams,
    StoryCreate,
    StoryRead,
)

logger = get_logger(__name__)


class StoryService:
    """Story business logic.

    Repositories only flush; this service commits on success and rolls back
    on failure. Database errors are re-raised unchanged.
    """

    def __init__(
        self,
        story_repo: StoryRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
        clock: Clock | None = None,
    ):
        self.story_repo = story_repo
        self.project_repo = project_repo
        self.session = session
        self.clock = clock or SystemClock()

    async def _get_project(self, project_id: int) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        bind_project_context(project.id)
        return project

    async def get_story(self, story_id: int) -> Story:
        """Get a story (with its project loaded) or raise NotFoundError."""
        story = await self.story_repo.get_by_id(story_id)
        if story is None:
            raise NotFoundError("Story", story_id)
        bind_project_context(story.project_id)
        return story

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Story write rejected by database", error=str(e.orig))
            raise
        except Exception:
            await self.session.rollback()
            raise

    async def create_story(self, project_id: int, request: StoryCreate) -> Story:
        """Create a story in an existing project."""
        project = await self._get_project(project_id)
        fields = request.model_dump(exclude_none=True)
        story = Story(project=project, **fields)
        if story.state == REJECTED:
            story.rejected_date = today(self.clock)
        self.story_repo.add(story)
        await self._commit()

        logger.info("Story created", story_id=story.id)
        return story

    async def reject_story(self, story_id: int) -> Story:
        """Reject a story as of today on the service clock."""
        story = await self.get_story(story_id)
        story.reject(self.clock)
        self.story_repo.add(story)
        await self._commit()

        logger.info(
            "Story rejected",
            story_id=story.id,
            rejected_date=story.rejected_date.isoformat() if story.rejected_date else None,
        )
        return story

    async def update_state(self, story_id: int, new_state: str) -> Story:
        """Set an arbitrary state and return the reloaded story."""
        story = await self.get_story(story_id)
        previous = story.state
        await self.story_repo.update_state(story, new_state, self.clock)
        await self._commit()
        await self.story_repo.refresh(story)

        logger.info("Story state updated", story_id=story.id, old=previous, new=story.state)
        return story

    async def delete_story(self, story_id: int) -> None:
        story = await self.get_story(story_id)
        await self.story_repo.delete(story)
        await self._commit()
        logger.info("Story deleted", story_id=story_id)

    async def search(self, project_id: int, params: SearchParams) -> list[Story]:
        project = await self._get_project(project_id)
        if params.is_empty:
            logger.debug("Search without filters returns nothing", project_id=project_id)
        return await self.story_repo.search(project, params)

    async def list_stories(
        self, project_id: int, cursor: str | None = None, limit: int = 50
    ) -> PaginatedResponse[StoryRead]:
        project = await self._get_project(project_id)
        stories, next_cursor, has_more = await self.story_repo.list_for_project(
            project, cursor, limit
        )
        return PaginatedResponse(
            items=[StoryRead.model_validate(s) for s in stories],
            next_cursor=next_cursor,
            has_more=has_more,
        )

    async def project_points(self, project_id: int) -> ProjectPoints:
        project = await self._get_project(project_id)
        return await self.story_repo.find_project_stories(project)

    async def rejection_histogram(self, project_id: int) -> list[RejectionDate]:
        project = await self._get_project(project_id)
        return await self.story_repo.rejection_histogram(project)
