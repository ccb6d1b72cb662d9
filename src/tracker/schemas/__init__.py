from src.tracker.schemas.pagination import PaginatedResponse
from src.tracker.schemas.project import ProjectCreate, ProjectPoints, ProjectRead
from src.tracker.schemas.story import (
    RejectionDate,
    SearchParams,
    StoryCreate,
    StoryRead,
)

__all__ = [
    # Pagination
    "PaginatedResponse",
    # Project
    "ProjectCreate",
    "ProjectPoints",
    "ProjectRead",
    # Story
    "RejectionDate",
    "SearchParams",
    "StoryCreate",
    "StoryRead",
]
