"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from project_hub.config import get_settings
from project_hub.logging_config import configure_logging
from project_hub.projects.repository import ProjectRepository
from project_hub.slack.client import SlackClient
from project_hub.slack.router import router as slack_router
from project_hub.slack.verification import SignatureInvalid

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and build shared collaborators."""
    settings = get_settings()
    configure_logging(settings.log_level)

    if not settings.slack_bot_token:
        logger.warning("SLACK_BOT_TOKEN is not set; Slack API calls will fail")
    if not settings.slack_signing_secret:
        logger.warning("SLACK_SIGNING_SECRET is not set; every request will be rejected")

    app.state.settings = settings
    app.state.slack_client = SlackClient(
        token=settings.slack_bot_token,
        base_url=settings.slack_api_base_url,
        timeout=settings.slack_api_timeout,
    )
    app.state.projects = ProjectRepository()
    yield


app = FastAPI(
    title="Project Hub",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.exception_handler(SignatureInvalid)
async def signature_invalid_handler(request: Request, exc: SignatureInvalid) -> PlainTextResponse:
    """Reject unverified Slack requests before any handler work runs."""
    return PlainTextResponse("invalid signature", status_code=401)


@app.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    """Health check endpoint. No verification."""
    return "ok"
