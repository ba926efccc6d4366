"""Authenticated Slack Web API client.

Wraps slack_sdk's AsyncWebClient so every call is addressed by method name,
authenticated with the bot token, bounded by a timeout and never retried.
All failures surface as ApiError; retry policy belongs to callers.
"""

import asyncio
import logging

import aiohttp
from fastapi import Request
from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

logger = logging.getLogger(__name__)

SLACK_API_BASE_URL = "https://slack.com/api/"


class ApiError(Exception):
    """A Slack API call failed: ``ok: false``, a non-JSON body, or a transport error."""

    def __init__(self, method: str, error: str, body: dict | None = None) -> None:
        super().__init__(f"Slack API error: {method} => {error}")
        self.method = method
        self.error = error
        self.body = body or {}


class SlackClient:
    """Calls Slack Web API methods with a JSON payload and bearer token."""

    def __init__(
        self,
        token: str,
        base_url: str = SLACK_API_BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        self._web_client = AsyncWebClient(
            token=token,
            base_url=base_url,
            timeout=timeout,
            retry_handlers=[],
        )

    async def call(self, method: str, payload: dict) -> dict:
        """POST ``payload`` to ``base_url + method`` and return the response body.

        Raises:
            ApiError: Slack answered ``ok: false`` (error code or
                ``unknown_error``), returned a non-JSON body, or the request
                never completed (``transport_error``).
        """
        try:
            response = await self._web_client.api_call(method, json=payload)
        except SlackApiError as exc:
            body = getattr(exc.response, "data", None)
            if not isinstance(body, dict):
                body = {}
            raise ApiError(method, body.get("error") or "unknown_error", body) from exc
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise ApiError(method, "transport_error") from exc

        data = response.data
        if not isinstance(data, dict):
            raise ApiError(method, "unknown_error")
        return data


def get_slack_client(request: Request) -> SlackClient:
    """FastAPI dependency: the client built in the app lifespan."""
    return request.app.state.slack_client
