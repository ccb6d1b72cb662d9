"""Project model."""

from sqlmodel import Field, SQLModel


class Project(SQLModel, table=True):
    """A named container of stories. Names are not unique."""

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=200, index=True)
