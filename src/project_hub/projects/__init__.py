"""Project storage."""

from project_hub.projects.repository import ProjectRepository, get_project_repository

__all__ = ["ProjectRepository", "get_project_repository"]
