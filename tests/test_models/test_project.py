"""Tests for the Project model."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from project_hub.models.project import Project


def test_project_valid():
    created = datetime(2026, 10, 19, tzinfo=timezone.utc)
    project = Project(
        id="PRJ-001",
        name="Stats MVP",
        description="Weekly numbers",
        created_by="U123",
        created_at=created,
    )
    assert project.id == "PRJ-001"
    assert project.created_at == created


def test_project_description_defaults_to_empty():
    project = Project(
        id="PRJ-001",
        name="Stats MVP",
        created_by="U123",
        created_at=datetime.now(timezone.utc),
    )
    assert project.description == ""


def test_project_missing_required_field():
    with pytest.raises(ValidationError):
        Project(name="Stats MVP", created_by="U123", created_at=datetime.now(timezone.utc))


def test_project_is_frozen():
    project = Project(
        id="PRJ-001",
        name="Stats MVP",
        created_by="U123",
        created_at=datetime.now(timezone.utc),
    )
    with pytest.raises(ValidationError):
        project.name = "Renamed"
