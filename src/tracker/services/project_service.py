"""Project service - creation and lookup."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.exceptions import NotFoundError
from src.tracker.core.logging import get_logger
from src.tracker.models import Project
from src.tracker.repositories import ProjectRepository
from src.tracker.schemas import PaginatedResponse, ProjectCreate, ProjectRead

logger = get_logger(__name__)


class ProjectService:
    """Project business logic. Owns the transaction boundary."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def create_project(self, request: ProjectCreate) -> Project:
        """Persist a new project and commit."""
        project = Project(name=request.name)
        try:
            await self.project_repo.save(project)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=project.id, name=project.name)
        return project

    async def get_project(self, project_id: int) -> Project:
        """Get a project or raise NotFoundError."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return project

    async def list_projects(
        self, cursor: str | None = None, limit: int = 50
    ) -> PaginatedResponse[ProjectRead]:
        projects, next_cursor, has_more = await self.project_repo.list_all(cursor, limit)
        return PaginatedResponse(
            items=[ProjectRead.model_validate(p) for p in projects],
            next_cursor=next_cursor,
            has_more=has_more,
        )
