"""
RouteDemo Backend — Request ID Middleware
==========================================

What:  Assigns an ID to each incoming request and echoes it on the response.
Why:   Error log lines written by routedemo.rendering and access log lines
       written by RequestLoggingMiddleware carry the same ID, so one request
       can be followed through the logs.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates a short UUID; stores it in a ContextVar and request.state.
When:  Outer middleware; runs before the access logger.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# What: Coroutine-local storage for the current request ID
# Why ContextVar: Concurrent requests share one thread under asyncio
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header if it sent one
        2. Otherwise generate an 8-character ID
        3. Store it in request_id_var (loggers) and request.state (RequestContext)
        4. Copy it onto the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
