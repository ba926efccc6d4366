"""Tests for slash command parsing and dispatch."""

from unittest.mock import AsyncMock, MagicMock
from urllib.parse import urlencode

from project_hub.models.slack import SlashCommand
from project_hub.slack.client import ApiError, SlackClient
from project_hub.slack.commands import (
    handle_slash_command,
    open_create_project_modal,
    parse_slash_command,
)
from project_hub.slack.views import CREATE_PROJECT_CALLBACK_ID


def _fake_client() -> MagicMock:
    fake = MagicMock(spec=SlackClient)
    fake.call = AsyncMock(return_value={"ok": True})
    return fake


def test_parse_slash_command_reads_fields():
    body = urlencode(
        {
            "command": "/create-project",
            "trigger_id": "13345224609.738474920",
            "user_id": "U123",
            "channel_id": "C456",
            "text": "",
        }
    ).encode()

    command = parse_slash_command(body)

    assert command.command == "/create-project"
    assert command.trigger_id == "13345224609.738474920"
    assert command.user_id == "U123"
    assert command.channel_id == "C456"
    assert command.text == ""


def test_parse_slash_command_missing_fields_are_empty():
    command = parse_slash_command(b"command=%2Fcreate-project")
    assert command.trigger_id == ""
    assert command.user_id == ""


def test_parse_slash_command_blank_fields_are_empty():
    command = parse_slash_command(b"command=%2Fcreate-project&text=&trigger_id=T-1")
    assert command.text == ""
    assert command.trigger_id == "T-1"


def test_unsupported_command_is_ignored():
    """Non-matching command: 200 "ok" and no background task."""
    bg = MagicMock()
    response = handle_slash_command(SlashCommand(command="/other-command"), _fake_client(), bg)

    assert response.status_code == 200
    assert response.body == b"ok"
    bg.add_task.assert_not_called()


def test_create_project_acknowledges_with_empty_body():
    bg = MagicMock()
    client = _fake_client()
    command = SlashCommand(command="/create-project", trigger_id="T-1", user_id="U1")

    response = handle_slash_command(command, client, bg)

    assert response.status_code == 200
    assert response.body == b""
    bg.add_task.assert_called_once()
    assert bg.add_task.call_args.args[0] is open_create_project_modal
    assert bg.add_task.call_args.kwargs == {"client": client, "trigger_id": "T-1"}
    # Nothing goes out before the acknowledgment
    client.call.assert_not_called()


async def test_open_modal_calls_views_open():
    client = _fake_client()

    await open_create_project_modal(client, "T-1")

    client.call.assert_awaited_once()
    method, payload = client.call.await_args.args
    assert method == "views.open"
    assert payload["trigger_id"] == "T-1"
    assert payload["view"]["callback_id"] == CREATE_PROJECT_CALLBACK_ID


async def test_open_modal_swallows_api_error(caplog):
    client = _fake_client()
    client.call.side_effect = ApiError("views.open", "expired_trigger_id", {"ok": False})

    await open_create_project_modal(client, "T-1")

    assert "expired_trigger_id" in caplog.text


async def test_open_modal_swallows_unexpected_error():
    client = _fake_client()
    client.call.side_effect = RuntimeError("boom")

    await open_create_project_modal(client, "T-1")
