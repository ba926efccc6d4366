"""Data models for the Project Hub service."""

from project_hub.models.project import Project
from project_hub.models.slack import (
    CreateProjectSubmission,
    Interaction,
    SlashCommand,
    UnrecognizedInteraction,
)

__all__ = [
    "Project",
    "SlashCommand",
    "CreateProjectSubmission",
    "UnrecognizedInteraction",
    "Interaction",
]
