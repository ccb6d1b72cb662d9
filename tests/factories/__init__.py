"""Test factories for generating test data.

    from tests.factories import ProjectFactory, StoryFactory
"""

from tests.factories.base import BaseFactory
from tests.factories.project import ProjectFactory
from tests.factories.story import StoryFactory

__all__ = [
    "BaseFactory",
    "ProjectFactory",
    "StoryFactory",
]
