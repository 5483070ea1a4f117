from __future__ import annotations

import time
import uuid

import structlog
from fastapi.responses import PlainTextResponse

logger = structlog.get_logger()


class RequestIDMiddleware:
    """Tags every response with ``x-request-id`` and logs its completion.

    Unhandled exceptions are rendered here as a plain-text 500 so the error
    response carries the header too. If the response had already started,
    the exception is re-raised.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        request_id = uuid.uuid4().hex
        scope.setdefault("state", {})
        scope["state"]["request_id"] = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()
        response = {"started": False, "status": 500}

        async def send_wrapper(message):
            if message.get("type") == "http.response.start":
                response["started"] = True
                response["status"] = message.get("status", 500)
                headers = message.setdefault("headers", [])
                headers.append((b"x-request-id", request_id.encode()))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            if response["started"]:
                raise
            logger.exception("unhandled_error", path=scope.get("path", ""), error=str(e))
            await PlainTextResponse(str(e), status_code=500)(scope, receive, send_wrapper)
        finally:
            dur_ms = int((time.perf_counter() - start) * 1000)
            logger.info(
                "request_completed",
                method=scope.get("method", ""),
                path=scope.get("path", ""),
                status=response["status"],
                duration_ms=dur_ms,
            )
            structlog.contextvars.unbind_contextvars("request_id")
