"""
Community Garden Backend — Request Context Middleware
======================================================

What:  Gives each request a correlation id and writes one access log line.
How:   Pure ASGI. The id is taken from an incoming X-Request-ID header or
       generated, stored in a ContextVar, and appended to the response
       start message. Status and duration are captured from `send`.

Level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

A request that dies before any response is sent is logged as 500.
/health is not logged. Form bodies are never logged.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

access_logger = logging.getLogger("garden.access")


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestContextMiddleware:

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        # 8 hex chars are enough to correlate log lines
        rid = Headers(scope=scope).get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        token = request_id_var.set(rid)
        scope.setdefault("state", {})["request_id"] = rid

        status = 500
        start_time = time.perf_counter()

        async def send_with_request_id(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                MutableHeaders(scope=message).append(REQUEST_ID_HEADER, rid)
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            if scope["path"] != "/health":
                client = scope.get("client")
                access_logger.log(
                    _level_for(status),
                    "%s %s %d %.1fms [%s] from %s",
                    scope["method"],
                    scope["path"],
                    status,
                    (time.perf_counter() - start_time) * 1000,
                    rid,
                    client[0] if client else "unknown",
                )
            request_id_var.reset(token)
