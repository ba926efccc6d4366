"""Slack notifications for newly created projects.

All functions are fire-and-forget: they catch and log errors but never raise,
so one failed notification cannot affect the other or the already-sent
modal acknowledgment.
"""

import logging

from project_hub.models.project import Project
from project_hub.slack.client import ApiError, SlackClient

logger = logging.getLogger(__name__)


def format_project_created(project: Project) -> str:
    """Build the confirmation text. Lines with no content are left out."""
    lines = [
        "\U0001f4c1 *Project created*",
        f"*{project.id}* — {project.name}",
        f"_{project.description}_" if project.description else "",
        f"Created by <@{project.created_by}>",
    ]
    return "\n".join(line for line in lines if line)


async def notify_user(client: SlackClient, user_id: str, text: str) -> None:
    """Open (or reuse) a DM with the user and post the text there.

    Args:
        client: Slack API client.
        user_id: Slack user ID of the submitter.
        text: Message body.
    """
    try:
        im = await client.call("conversations.open", {"users": user_id})
        channel_id = im["channel"]["id"]
        await client.call("chat.postMessage", {"channel": channel_id, "text": text})
    except ApiError as exc:
        logger.warning(
            "DM to %s failed: %s => %s %s", user_id, exc.method, exc.error, exc.body
        )
    except Exception:
        logger.error("DM to %s failed", user_id, exc_info=True)


async def announce_project(client: SlackClient, channel: str, text: str) -> None:
    """Post the text to the announcement channel.

    Args:
        client: Slack API client.
        channel: Channel ID or ``#name``.
        text: Message body.
    """
    try:
        await client.call("chat.postMessage", {"channel": channel, "text": text})
    except ApiError as exc:
        logger.warning(
            "Announcement to %s failed: %s => %s %s", channel, exc.method, exc.error, exc.body
        )
    except Exception:
        logger.error("Announcement to %s failed", channel, exc_info=True)


async def notify_project_created(client: SlackClient, project: Project, channel: str) -> None:
    """DM the creator and announce the project. Each step is attempted independently."""
    text = format_project_created(project)
    await notify_user(client, project.created_by, text)
    await announce_project(client, channel, text)
    logger.info("Notifications attempted for project %s", project.id)
