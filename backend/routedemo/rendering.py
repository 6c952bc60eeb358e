"""
RouteDemo Backend — Outcome Rendering
======================================

What:  The single step that turns a handler outcome into an HTTP response.
Why:   Routes and exception hooks all end here, so the debug rules for error
       pages live in one function instead of being repeated per route.
How:   `render_outcome()` dispatches on the outcome type:

           Reply    → HTMLResponse / JSONResponse with the reply's status
           Failure  → error page, debug-dependent (see below)

Error pages:
    debug off:  404 → "The requested page could not be found."
                any other code → "We are sorry, but something went terribly wrong."
    debug on:   the failure's own message, as text/plain

    The status code is always the failure's code. Uncaught exceptions in debug
    mode never reach this module: Starlette's ServerErrorMiddleware answers
    with its traceback page first.

Logging:
    Every failure is logged with the request ID; 4xx at WARNING, 5xx at ERROR.
    The failure's context dict goes to the log only, never to the client.
"""

import logging

from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from starlette.responses import Response

from routedemo.middleware.request_id import request_id_var
from routedemo.outcomes import Failure, MediaType, Outcome, Reply

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND = "The requested page could not be found."
GENERIC_FAILURE = "We are sorry, but something went terribly wrong."


def error_page_text(status_code: int) -> str:
    """User-facing text shown for a failure when debug is off."""
    return PAGE_NOT_FOUND if status_code == 404 else GENERIC_FAILURE


def render_reply(reply: Reply) -> Response:
    if reply.media_type is MediaType.JSON:
        return JSONResponse(content=reply.body, status_code=reply.status_code)
    return HTMLResponse(content=reply.body, status_code=reply.status_code)


def render_failure(failure: Failure, debug: bool) -> Response:
    status = failure.status_code
    rid = request_id_var.get("")
    log_level = logging.ERROR if status >= 500 else logging.WARNING
    logger.log(
        log_level,
        "[%s] %s (%d): %s | Context: %s",
        rid,
        failure.kind.value,
        status,
        failure.message,
        failure.context,
    )

    if debug:
        return PlainTextResponse(
            content=failure.message, status_code=status, headers=failure.headers
        )
    return HTMLResponse(
        content=error_page_text(status), status_code=status, headers=failure.headers
    )


def render_outcome(outcome: Outcome, debug: bool = False) -> Response:
    if isinstance(outcome, Failure):
        return render_failure(outcome, debug)
    return render_reply(outcome)
