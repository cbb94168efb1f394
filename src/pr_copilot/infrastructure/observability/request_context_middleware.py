"""ASGI middleware that scopes structlog context to one HTTP request.

The caller's ``X-Request-Id`` (or a generated one) is bound as ``correlation_id``
and echoed back on the response, so log lines and client traces line up.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bound_contextvars

logger = structlog.get_logger()

REQUEST_ID_HEADER = b"x-request-id"


class RequestContextMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = _header(scope, REQUEST_ID_HEADER) or uuid4().hex
        response_status = 500

        async def send_with_request_id(message: dict[str, Any]) -> None:
            nonlocal response_status
            if message["type"] == "http.response.start":
                response_status = message["status"]
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, correlation_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        started = time.perf_counter()
        with bound_contextvars(
            correlation_id=correlation_id,
            context_endpoint=scope.get("path", "/"),
            context_method=scope.get("method", "UNKNOWN"),
        ):
            try:
                await self.app(scope, receive, send_with_request_id)
            finally:
                logger.info(
                    "Request processed",
                    http_status=response_status,
                    processing_status="SUCCESS" if response_status < 400 else "ERROR",
                    processing_duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )


def _header(scope: dict[str, Any], name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None
