"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from project_hub.app import app
from project_hub.config import get_settings
from project_hub.slack.client import SlackClient, get_slack_client

TEST_SIGNING_SECRET = "test_signing_secret_1234"


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch):
    """Point settings at test credentials and drop the cached instance."""
    monkeypatch.setenv("SLACK_SIGNING_SECRET", TEST_SIGNING_SECRET)
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-test")
    monkeypatch.setenv("SLACK_PROJECTS_CHANNEL", "#mvp-log")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def slack_api() -> MagicMock:
    """A SlackClient stand-in whose ``call`` is an AsyncMock."""
    fake = MagicMock(spec=SlackClient)
    fake.call = AsyncMock(return_value={"ok": True})
    return fake


@pytest.fixture
def client(slack_api: MagicMock):
    """TestClient with the lifespan running and the Slack client swapped out."""
    app.dependency_overrides[get_slack_client] = lambda: slack_api
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
