"""Model exports.

Import from here: `from src.tracker.models import Project, Story`
"""

from src.tracker.models.enums import StoryState
from src.tracker.models.project import Project
from src.tracker.models.story import REJECTED, Story

__all__ = [
    # Enums
    "StoryState",
    "REJECTED",
    # Tables
    "Project",
    "Story",
]
