"""
RouteDemo Backend — Greeting Routes
====================================

What:  GET / and GET /hello/{name}.
Why:   The smallest possible routes: a static page and a page with one
       constrained placeholder.

Matching:
    /hello/World  → "Hello World"
    /hello/123    → no route matches (name must be letters only) → 404
"""

from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from routedemo.config import Settings
from routedemo.context import get_settings
from routedemo.outcomes import Reply
from routedemo.rendering import render_outcome
from routedemo.routing import ALPHA

router = APIRouter(tags=["Greetings"])


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Static greeting",
)
async def homepage(settings: Settings = Depends(get_settings)) -> Response:
    return render_outcome(Reply.html("Hello world!"), debug=settings.debug)


@router.get(
    f"/hello/{{name:{ALPHA}}}",
    response_class=HTMLResponse,
    summary="Greet by name",
    description="Only matches when `name` consists of ASCII letters.",
)
async def hello(name: str, settings: Settings = Depends(get_settings)) -> Response:
    return render_outcome(Reply.html(f"Hello {escape(name)}"), debug=settings.debug)
