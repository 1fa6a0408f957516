from datetime import datetime

from pydantic import Field

from app.models.base import CamelModel


class SessionCreate(CamelModel):
    name: str | None = None


class SessionCreated(CamelModel):
    session_id: str
    user_id: str


class ProjectRename(CamelModel):
    name: str | None = None


class ProjectRenamed(CamelModel):
    success: bool = True
    name: str


class ProjectSummary(CamelModel):
    id: str
    name: str
    created_at: datetime
    photo_count: int
    vote_count: int


class ProjectList(CamelModel):
    projects: list[ProjectSummary] = Field(default_factory=list)
    user_id: str | None = None
