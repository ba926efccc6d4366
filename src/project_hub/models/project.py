"""Project model created from the "create project" modal."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Project(BaseModel):
    """A created project. Immutable once the repository has assigned its id."""

    model_config = ConfigDict(frozen=True)

    id: str  # e.g., "PRJ-001"
    name: str
    description: str = ""
    created_by: str  # Slack user ID
    created_at: datetime
