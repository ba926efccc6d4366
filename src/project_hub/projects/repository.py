"""In-memory project store with sequential ID assignment.

Projects live for the lifetime of the process. One repository is created in
the app lifespan and handed to the interaction dispatcher through a FastAPI
dependency; there is no module-level store.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone

from fastapi import Request

from project_hub.models.project import Project

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProjectRepository:
    """Thread-safe store assigning ``PRJ-001``, ``PRJ-002``, ... in creation order."""

    def __init__(
        self,
        prefix: str = "PRJ",
        width: int = 3,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._prefix = prefix
        self._width = width
        self._clock = clock
        self._next_seq = 1
        self._projects: dict[str, Project] = {}
        self._lock = threading.Lock()

    def _format_id(self, seq: int) -> str:
        return f"{self._prefix}-{seq:0{self._width}d}"

    def create(self, name: str, description: str, created_by: str) -> Project:
        """Create and store a project, returning it with its assigned id.

        ID assignment and insertion form one critical section. The counter is
        only advanced once the project is stored, so a failure while building
        the record leaves neither a gap nor a partial entry.
        """
        with self._lock:
            project_id = self._format_id(self._next_seq)
            project = Project(
                id=project_id,
                name=name,
                description=description,
                created_by=created_by,
                created_at=self._clock(),
            )
            self._projects[project_id] = project
            self._next_seq += 1

        logger.info("Created project %s (%s) for %s", project.id, project.name, created_by)
        return project

    def get(self, project_id: str) -> Project | None:
        """Return the project with this id, or None."""
        with self._lock:
            return self._projects.get(project_id)

    def list_projects(self) -> list[Project]:
        """Return all projects in creation order."""
        with self._lock:
            return list(self._projects.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._projects)


def get_project_repository(request: Request) -> ProjectRepository:
    """FastAPI dependency: the repository owned by the running app."""
    return request.app.state.projects
