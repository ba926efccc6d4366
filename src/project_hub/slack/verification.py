"""Slack request signature verification.

Slack signs every request with HMAC-SHA256 over ``v0:<timestamp>:<raw body>``
keyed by the app's signing secret. Requests older or newer than five minutes
are rejected to limit replays.
"""

import hmac
import logging
import time
from collections.abc import Callable, Mapping

from fastapi import Request
from slack_sdk.signature import SignatureVerifier as SlackSignatureBuilder

logger = logging.getLogger(__name__)

REPLAY_WINDOW_SECONDS = 300
TIMESTAMP_HEADER = "x-slack-request-timestamp"
SIGNATURE_HEADER = "x-slack-signature"


class SignatureInvalid(Exception):
    """Raised when an inbound request fails signature verification."""


def _header(headers: Mapping, name: str):
    # Starlette Headers is case-insensitive already; plain dicts are not.
    value = headers.get(name)
    if value is None:
        for key, candidate in headers.items():
            if isinstance(key, str) and key.lower() == name:
                return candidate
    return value


class SignatureVerifier:
    """Checks Slack request signatures against a shared signing secret."""

    def __init__(self, signing_secret: str, clock: Callable[[], float] = time.time) -> None:
        self._builder = SlackSignatureBuilder(signing_secret=signing_secret)
        self._clock = clock

    def expected_signature(self, timestamp: str, raw_body: bytes) -> str:
        """Return ``v0=<hex hmac>`` for the given timestamp and body."""
        return self._builder.generate_signature(timestamp=timestamp, body=raw_body)

    def verify(self, raw_body: bytes, headers: Mapping) -> bool:
        """Return True only for a fresh request carrying a matching signature.

        Fails closed on missing or non-string headers, a non-integer timestamp,
        a timestamp outside the replay window in either direction, and a body
        that is not valid UTF-8.
        """
        timestamp = _header(headers, TIMESTAMP_HEADER)
        signature = _header(headers, SIGNATURE_HEADER)
        if not isinstance(timestamp, str) or not isinstance(signature, str):
            return False

        # Slack sends plain decimal digits; int() alone would also take "+1", " 1" or "1_0".
        if not (timestamp.isascii() and timestamp.isdigit()):
            return False
        try:
            request_time = int(timestamp)
        except ValueError:
            return False

        if abs(int(self._clock()) - request_time) > REPLAY_WINDOW_SECONDS:
            return False

        try:
            expected = self.expected_signature(timestamp, raw_body)
        except UnicodeDecodeError:
            return False

        expected_bytes = expected.encode("utf-8")
        supplied_bytes = signature.encode("utf-8")
        if len(expected_bytes) != len(supplied_bytes):
            return False
        return hmac.compare_digest(expected_bytes, supplied_bytes)


async def verify_slack_request(request: Request) -> bytes:
    """FastAPI dependency: verify the signature and return the raw body.

    Reads the raw body FIRST so verification runs over the exact bytes Slack
    signed, not a re-serialized form.

    Raises SignatureInvalid, which the app turns into a 401.
    """
    settings = request.app.state.settings
    body = await request.body()

    verifier = SignatureVerifier(signing_secret=settings.slack_signing_secret)
    if not verifier.verify(body, request.headers):
        logger.warning("Rejected request with invalid Slack signature: %s", request.url.path)
        raise SignatureInvalid(request.url.path)

    return body
