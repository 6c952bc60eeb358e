"""
RouteDemo Backend — User Route
===============================

What:  GET /users.json/{id} — JSON user lookup.
Why:   Shows a JSON endpoint, including a JSON error body on 404.
"""

from fastapi import APIRouter, Depends
from starlette.responses import Response

from routedemo.config import Settings
from routedemo.context import get_fixtures, get_settings
from routedemo.fixtures import Fixtures
from routedemo.rendering import render_outcome
from routedemo.routing import DIGITS
from routedemo.schemas.responses import UserNotFoundResponse, UserResponse
from routedemo.services.user_service import user_service

router = APIRouter(tags=["Users"])


@router.get(
    f"/users.json/{{user_id:{DIGITS}}}",
    response_model=UserResponse,
    responses={404: {"description": "User not found", "model": UserNotFoundResponse}},
    summary="Look up a user",
)
async def get_user(
    user_id: str,
    fixtures: Fixtures = Depends(get_fixtures),
    settings: Settings = Depends(get_settings),
) -> Response:
    return render_outcome(user_service.lookup(fixtures, user_id), debug=settings.debug)
