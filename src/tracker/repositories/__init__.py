"""Repository layer - data access abstraction."""

from src.tracker.repositories.base import BaseRepository
from src.tracker.repositories.project import ProjectRepository
from src.tracker.repositories.story import StoryRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "StoryRepository",
]
