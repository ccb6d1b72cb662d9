"""Story schemas: query object, read model and aggregate projections."""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchParams(BaseModel):
    """Optional story filters, combined with AND.

    title and requester match case-insensitive substrings; points matches
    exactly. A params object with nothing set matches nothing.
    """

    title: str | None = None
    requester: str | None = None
    points: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("title", "requester")
    @classmethod
    def blank_is_unset(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.requester is None and self.points is None


class StoryCreate(BaseModel):
    """Schema for creating a story."""

    title: str | None = Field(default=None, max_length=500)
    requester: str | None = Field(default=None, max_length=200)
    points: int | None = Field(default=None, ge=0)
    state: str | None = Field(default=None, min_length=1, max_length=50)


class StoryRead(BaseModel):
    """Schema for reading a story."""

    id: int
    title: str | None
    requester: str | None
    points: int | None
    state: str
    rejected_date: datetime.date | None
    project_id: int

    model_config = ConfigDict(from_attributes=True)


class RejectionDate(BaseModel):
    """Number of stories rejected on one date."""

    date: datetime.date
    count: int

    model_config = ConfigDict(frozen=True)
