"""Slack webhook routes. Every route is gated by signature verification."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import Response

from project_hub.projects.repository import ProjectRepository, get_project_repository
from project_hub.slack.client import SlackClient, get_slack_client
from project_hub.slack.commands import handle_slash_command, parse_slash_command
from project_hub.slack.interactions import handle_interaction
from project_hub.slack.verification import verify_slack_request

router = APIRouter(prefix="/slack", tags=["slack"])


@router.post("/commands")
async def slack_commands(
    background_tasks: BackgroundTasks,
    raw_body: bytes = Depends(verify_slack_request),
    client: SlackClient = Depends(get_slack_client),
) -> Response:
    """Receive slash commands (form-encoded). Responds before any Slack API call."""
    command = parse_slash_command(raw_body)
    return handle_slash_command(command, client, background_tasks)


@router.post("/interactions")
async def slack_interactions(
    request: Request,
    background_tasks: BackgroundTasks,
    raw_body: bytes = Depends(verify_slack_request),
    client: SlackClient = Depends(get_slack_client),
    repository: ProjectRepository = Depends(get_project_repository),
) -> Response:
    """Receive modal submissions and other interactive payloads."""
    settings = request.app.state.settings
    return handle_interaction(
        raw_body,
        client,
        repository,
        settings.slack_projects_channel,
        background_tasks,
    )
