"""
Per-request logging of method, path and JSON body.

Password fields are redacted before anything is written.
"""

import json
import logging

from fastapi import Request

logger = logging.getLogger("app.requests")

REDACTED_FIELDS = ("password",)


def _redact(value):
    if isinstance(value, dict):
        return {
            key: "***" if key in REDACTED_FIELDS else _redact(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_redact(item) for item in value]
    return value


async def log_request(request: Request) -> None:
    """App-wide dependency that logs each routed request."""
    body = {}
    raw = await request.body()
    if raw:
        try:
            body = _redact(json.loads(raw))
        except ValueError:
            body = f"<{len(raw)} bytes>"

    logger.info(f"Method: {request.method}")
    logger.info(f"Path:   {request.url.path}")
    logger.info(f"Body:   {body}")
    logger.info("---")
