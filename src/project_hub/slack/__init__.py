"""Slack ingress: signature verification, command and interaction dispatch, and notifications."""

from project_hub.slack.client import ApiError, SlackClient, get_slack_client
from project_hub.slack.notifier import (
    announce_project,
    format_project_created,
    notify_project_created,
    notify_user,
)
from project_hub.slack.router import router
from project_hub.slack.verification import SignatureInvalid, SignatureVerifier

__all__ = [
    "announce_project",
    "ApiError",
    "format_project_created",
    "get_slack_client",
    "notify_project_created",
    "notify_user",
    "router",
    "SignatureInvalid",
    "SignatureVerifier",
    "SlackClient",
]
