from src.tracker.services.project_service import ProjectService
from src.tracker.services.story_service import StoryService

__all__ = ["ProjectService", "StoryService"]
