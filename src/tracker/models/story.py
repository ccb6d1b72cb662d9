"""Story model - a unit of work owned by exactly one project."""

from datetime import date

from sqlalchemy import CheckConstraint
from sqlmodel import Field, Relationship, SQLModel

from src.tracker.core.clock import Clock, today
from src.tracker.models.enums import StoryState
from src.tracker.models.project import Project

REJECTED = StoryState.REJECTED.value


class Story(SQLModel, table=True):
    """Story entity.

    ``rejected_date`` is set exactly when ``state`` is the rejected marker;
    the check constraint below holds the database to the same rule.
    """

    __tablename__ = "stories"
    __table_args__ = (
        CheckConstraint("points IS NULL OR points >= 0", name="ck_stories_points_non_negative"),
        CheckConstraint(
            f"(state = '{REJECTED}') = (rejected_date IS NOT NULL)",
            name="ck_stories_rejected_date_matches_state",
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    title: str | None = Field(default=None, max_length=500)
    requester: str | None = Field(default=None, max_length=200)
    points: int | None = Field(default=None)
    state: str = Field(default=StoryState.OPEN.value, max_length=50)
    rejected_date: date | None = Field(default=None)
    project_id: int | None = Field(
        default=None, foreign_key="projects.id", nullable=False, index=True
    )

    # selectin so the project is usable after the session-bound fetch returns.
    # No save-update cascade: an unsaved project leaves project_id NULL and the
    # insert fails instead of creating the project as a side effect.
    project: Project = Relationship(
        sa_relationship_kwargs={"lazy": "selectin", "cascade": "merge"}
    )

    @property
    def is_rejected(self) -> bool:
        return self.state == REJECTED

    def reject(self, clock: Clock) -> None:
        """Mark the story rejected as of ``clock``'s current date.

        Only mutates the instance; the caller persists it.
        """
        self.rejected_date = today(clock)
        self.state = REJECTED
