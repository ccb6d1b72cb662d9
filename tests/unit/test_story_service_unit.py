"""Unit tests for StoryService with mocked repositories."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from src.tracker.core.exceptions import NotFoundError
from src.tracker.models import Project, Story
from src.tracker.schemas import SearchParams, StoryCreate
from src.tracker.services import StoryService

pytestmark = pytest.mark.unit


@pytest.fixture
def project() -> Project:
    return Project(id=1, name="Tractor")


@pytest.fixture
def mock_story_repo() -> MagicMock:
    repo = MagicMock()
    repo.add = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.update_state = AsyncMock(return_value=1)
    repo.refresh = AsyncMock()
    repo.search = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_project_repo(project: Project) -> MagicMock:
    repo = MagicMock()
    repo.get_by_id = AsyncMock(side_effect=lambda pid: project if pid == project.id else None)
    return repo


@pytest.fixture
def mock_session() -> AsyncMock:
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def story_service(
    mock_story_repo, mock_project_repo, mock_session, leap_day_clock
) -> StoryService:
    return StoryService(mock_story_repo, mock_project_repo, mock_session, clock=leap_day_clock)


class TestCreateStory:
    async def test_commits_new_story(self, story_service, mock_story_repo, mock_session, project):
        story = await story_service.create_story(project.id, StoryCreate(title="Tre", points=3))

        added = mock_story_repo.add.call_args[0][0]
        assert added is story
        assert story.project is project
        assert story.points == 3
        assert story.state == "open"
        mock_session.commit.assert_awaited_once()

    async def test_unknown_project(self, story_service, mock_session):
        with pytest.raises(NotFoundError):
            await story_service.create_story(99, StoryCreate(title="Orphan"))

        mock_session.commit.assert_not_awaited()

    async def test_integrity_error_rolls_back_and_reraises(
        self, story_service, mock_session, project
    ):
        error = IntegrityError("INSERT", {}, Exception("CHECK constraint failed"))
        mock_session.commit.side_effect = error

        with pytest.raises(IntegrityError) as exc_info:
            await story_service.create_story(project.id, StoryCreate(title="Bad"))

        assert exc_info.value is error
        mock_session.rollback.assert_awaited_once()

    async def test_logs_creation(self, story_service, project, capturing_logger):
        await story_service.create_story(project.id, StoryCreate(title="Tre"))

        events = [call.kwargs["event"] for call in capturing_logger.calls]
        assert "Story created" in events

    async def test_creation_log_carries_project_context(
        self, story_service, project, capturing_logger
    ):
        await story_service.create_story(project.id, StoryCreate(title="Tre"))

        created = [c for c in capturing_logger.calls if c.kwargs["event"] == "Story created"]
        assert len(created) == 1
        assert created[0].kwargs["project_id"] == project.id

    async def test_rejected_state_gets_todays_date(self, story_service, project):
        story = await story_service.create_story(
            project.id, StoryCreate(title="Nope", state="rejected")
        )

        assert story.state == "rejected"
        assert story.rejected_date == date(2004, 2, 29)


class TestRejectStory:
    async def test_uses_service_clock(self, story_service, mock_story_repo, project):
        story = Story(id=5, title="Tre", project=project)
        mock_story_repo.get_by_id.return_value = story

        result = await story_service.reject_story(5)

        assert result.rejected_date == date(2004, 2, 29)
        assert result.state == "rejected"

    async def test_missing_story(self, story_service):
        with pytest.raises(NotFoundError) as exc_info:
            await story_service.reject_story(5)

        assert str(exc_info.value) == "Story 5 not found"


class TestUpdateState:
    async def test_delegates_with_clock(
        self, story_service, mock_story_repo, mock_session, project, leap_day_clock
    ):
        story = Story(id=5, title="Tre", state="started", project=project)
        mock_story_repo.get_by_id.return_value = story

        await story_service.update_state(5, "Finished")

        mock_story_repo.update_state.assert_awaited_once_with(story, "Finished", leap_day_clock)
        mock_session.commit.assert_awaited_once()
        mock_story_repo.refresh.assert_awaited_once_with(story)


class TestSearch:
    async def test_scopes_to_loaded_project(self, story_service, mock_story_repo, project):
        params = SearchParams(title="John")

        await story_service.search(project.id, params)

        mock_story_repo.search.assert_awaited_once_with(project, params)
