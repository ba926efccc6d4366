"""Slack inbound payload models: slash commands and interaction variants."""

from typing import Literal

from pydantic import BaseModel


class SlashCommand(BaseModel):
    """Fields read from a form-encoded slash command request."""

    command: str = ""
    trigger_id: str = ""  # Short-lived, only valid for ~3 seconds
    user_id: str = ""
    channel_id: str = ""
    text: str = ""


class CreateProjectSubmission(BaseModel):
    """A view_submission for the create-project modal."""

    kind: Literal["create_project_submission"] = "create_project_submission"
    user_id: str
    values: dict  # block_id -> action_id -> element state


class UnrecognizedInteraction(BaseModel):
    """Any interaction this service does not handle. Acknowledged and ignored."""

    kind: Literal["unrecognized"] = "unrecognized"
    type: str | None = None
    callback_id: str | None = None


Interaction = CreateProjectSubmission | UnrecognizedInteraction
