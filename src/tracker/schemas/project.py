"""Project schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProjectPoints(BaseModel):
    """Total story points of one project."""

    name: str
    points: int

    model_config = ConfigDict(frozen=True)
