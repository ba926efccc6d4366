"""Slash command dispatch: acknowledge first, then open the modal in the background."""

import logging
from urllib.parse import parse_qs

from fastapi import BackgroundTasks
from fastapi.responses import PlainTextResponse, Response

from project_hub.models.slack import SlashCommand
from project_hub.slack.client import ApiError, SlackClient
from project_hub.slack.views import CREATE_PROJECT_COMMAND, build_create_project_modal

logger = logging.getLogger(__name__)


def parse_slash_command(raw_body: bytes) -> SlashCommand:
    """Decode a form-encoded slash command body. Missing fields become empty strings."""
    params = parse_qs(raw_body.decode("utf-8"), keep_blank_values=True)
    fields = {key: values[0] for key, values in params.items() if values}
    return SlashCommand(
        command=fields.get("command", ""),
        trigger_id=fields.get("trigger_id", ""),
        user_id=fields.get("user_id", ""),
        channel_id=fields.get("channel_id", ""),
        text=fields.get("text", ""),
    )


def handle_slash_command(
    command: SlashCommand,
    client: SlackClient,
    background_tasks: BackgroundTasks,
) -> Response:
    """Acknowledge a verified slash command.

    - /create-project: empty 200 now, ``views.open`` after the response is sent
    - anything else: 200 "ok", nothing else happens
    """
    if command.command != CREATE_PROJECT_COMMAND:
        logger.info("Ignoring unsupported command %r", command.command)
        return PlainTextResponse("ok")

    logger.info("Opening create-project modal for user %s", command.user_id)
    background_tasks.add_task(
        open_create_project_modal,
        client=client,
        trigger_id=command.trigger_id,
    )
    return Response(status_code=200)


async def open_create_project_modal(client: SlackClient, trigger_id: str) -> None:
    """Ask Slack to open the create-project modal.

    Runs after the HTTP response has completed, so failures are logged and
    dropped: the user simply never sees the form.
    """
    try:
        await client.call(
            "views.open",
            {"trigger_id": trigger_id, "view": build_create_project_modal()},
        )
    except ApiError as exc:
        logger.error("views.open failed: %s => %s %s", exc.method, exc.error, exc.body)
    except Exception:
        logger.error("views.open failed", exc_info=True)
