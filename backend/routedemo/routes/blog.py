"""
RouteDemo Backend — Blog Routes
================================

What:  GET /blog (listing) and GET /blog/show/{id} (detail).
How:   Reads the Fixtures from app.state and delegates to BlogService.
       {id} uses the digits convertor: only digits match, and the handler
       receives the segment exactly as sent ("01" stays "01").
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from routedemo.config import Settings
from routedemo.context import get_fixtures, get_settings
from routedemo.fixtures import Fixtures
from routedemo.rendering import render_outcome
from routedemo.routing import DIGITS
from routedemo.services.blog_service import blog_service

router = APIRouter(prefix="/blog", tags=["Blog"])


@router.get(
    "",
    response_class=HTMLResponse,
    summary="List blog posts",
)
async def list_posts(
    fixtures: Fixtures = Depends(get_fixtures),
    settings: Settings = Depends(get_settings),
) -> Response:
    return render_outcome(blog_service.list_posts(fixtures), debug=settings.debug)


@router.get(
    f"/show/{{post_id:{DIGITS}}}",
    response_class=HTMLResponse,
    responses={404: {"description": "Post does not exist"}},
    summary="Show a single blog post",
)
async def show_post(
    post_id: str,
    fixtures: Fixtures = Depends(get_fixtures),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Renders the post's title and body.

    Unknown ids produce a NOT_FOUND failure ("Post {id} does not exist.");
    with debug off the client sees the generic page-not-found text.
    """
    return render_outcome(blog_service.show_post(fixtures, post_id), debug=settings.debug)
