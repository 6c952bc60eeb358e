"""
RouteDemo Backend — Feedback Route
===================================

What:  POST /feedback — reads the `message` parameter and thanks the sender.
How:   The handler asks for a form-parsed RequestContext; `message` is looked
       up in path params, then query string, then form fields.

Responses:
    201 "Thank you for your feedback!<br />"
    500 when `message` is missing or empty
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from routedemo.config import Settings
from routedemo.context import RequestContext, form_context, get_settings
from routedemo.rendering import render_outcome
from routedemo.services.feedback_service import feedback_service

router = APIRouter(tags=["Feedback"])


@router.post(
    "/feedback",
    status_code=201,
    response_class=HTMLResponse,
    responses={500: {"description": "No message was posted"}},
    summary="Send feedback",
)
async def send_feedback(
    context: RequestContext = Depends(form_context),
    settings: Settings = Depends(get_settings),
) -> Response:
    outcome = feedback_service.submit(context.get("message"))
    return render_outcome(outcome, debug=settings.debug)
