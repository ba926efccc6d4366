"""Interaction dispatch for modal submissions.

Slack posts interactions as a form body with a single ``payload`` field holding
JSON. Only the create-project view_submission is handled; everything else is
acknowledged with "ok" and ignored.

A submission is validated and the project is stored *before* the response is
returned, so the "clear" acknowledgment never refers to an uncommitted project.
Notifications go out in the background after the modal has closed.

Redelivered requests are not deduplicated: a fresh, correctly signed duplicate
creates a second project.
"""

import json
import logging
from urllib.parse import parse_qs

from fastapi import BackgroundTasks
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from project_hub.models.slack import (
    CreateProjectSubmission,
    Interaction,
    UnrecognizedInteraction,
)
from project_hub.projects.repository import ProjectRepository
from project_hub.slack.client import SlackClient
from project_hub.slack.notifier import notify_project_created
from project_hub.slack.views import (
    CREATE_PROJECT_CALLBACK_ID,
    DESCRIPTION_ACTION_ID,
    DESCRIPTION_BLOCK_ID,
    NAME_ACTION_ID,
    NAME_BLOCK_ID,
)

logger = logging.getLogger(__name__)

NAME_REQUIRED_MESSAGE = "Project name is required."


def extract_payload(raw_body: bytes) -> dict | None:
    """Return the decoded ``payload`` JSON object, or None if absent or unreadable."""
    params = parse_qs(raw_body.decode("utf-8"), keep_blank_values=True)
    values = params.get("payload")
    if not values:
        return None

    try:
        payload = json.loads(values[0])
    except json.JSONDecodeError:
        logger.warning("Interaction payload is not valid JSON")
        return None

    if not isinstance(payload, dict):
        logger.warning("Interaction payload is not a JSON object")
        return None
    return payload


def parse_interaction(payload: dict) -> Interaction:
    """Classify an interaction payload into a known variant."""
    view = payload.get("view")
    view = view if isinstance(view, dict) else {}
    payload_type = payload.get("type")
    callback_id = view.get("callback_id")

    if payload_type == "view_submission" and callback_id == CREATE_PROJECT_CALLBACK_ID:
        user = payload.get("user")
        user_id = user.get("id", "") if isinstance(user, dict) else ""
        state = view.get("state")
        values = state.get("values") if isinstance(state, dict) else None
        return CreateProjectSubmission(
            user_id=user_id or "",
            values=values if isinstance(values, dict) else {},
        )

    return UnrecognizedInteraction(
        type=payload_type if isinstance(payload_type, str) else None,
        callback_id=callback_id if isinstance(callback_id, str) else None,
    )


def _field_value(values: dict, block_id: str, action_id: str) -> str:
    block = values.get(block_id)
    element = block.get(action_id) if isinstance(block, dict) else None
    value = element.get("value") if isinstance(element, dict) else None
    return value.strip() if isinstance(value, str) else ""


def extract_project_fields(values: dict) -> tuple[str, str]:
    """Return the trimmed (name, description) from submitted view state."""
    name = _field_value(values, NAME_BLOCK_ID, NAME_ACTION_ID)
    description = _field_value(values, DESCRIPTION_BLOCK_ID, DESCRIPTION_ACTION_ID)
    return name, description


def validate_project_fields(name: str) -> dict[str, str]:
    """Return block_id -> error message; empty when the submission is valid."""
    errors: dict[str, str] = {}
    if not name:
        errors[NAME_BLOCK_ID] = NAME_REQUIRED_MESSAGE
    return errors


def handle_interaction(
    raw_body: bytes,
    client: SlackClient,
    repository: ProjectRepository,
    projects_channel: str,
    background_tasks: BackgroundTasks,
) -> Response:
    """Dispatch a verified interaction request and build its acknowledgment."""
    payload = extract_payload(raw_body)
    if payload is None:
        return PlainTextResponse("ok")

    interaction = parse_interaction(payload)
    if isinstance(interaction, UnrecognizedInteraction):
        logger.info(
            "Ignoring interaction type=%s callback_id=%s",
            interaction.type,
            interaction.callback_id,
        )
        return PlainTextResponse("ok")

    return handle_create_project(
        interaction, client, repository, projects_channel, background_tasks
    )


def handle_create_project(
    submission: CreateProjectSubmission,
    client: SlackClient,
    repository: ProjectRepository,
    projects_channel: str,
    background_tasks: BackgroundTasks,
) -> JSONResponse:
    """Validate the submission, create the project, then schedule notifications.

    An ``errors`` response keeps the modal open with a message on the name
    field; a ``clear`` response closes it.
    """
    name, description = extract_project_fields(submission.values)

    errors = validate_project_fields(name)
    if errors:
        logger.info("Rejected create-project submission from %s: %s", submission.user_id, errors)
        return JSONResponse({"response_action": "errors", "errors": errors})

    project = repository.create(name, description, submission.user_id)

    background_tasks.add_task(
        notify_project_created,
        client=client,
        project=project,
        channel=projects_channel,
    )
    return JSONResponse({"response_action": "clear"})
