"""
RouteDemo Backend — User Lookup Service
========================================

What:  Answers GET /users.json/{id} with a JSON user record.
Why:   Demonstrates JSON responses, including a JSON body on a 404.
How:   There is no user store. The configured sample user stands in for
       every id; with no sample user configured every lookup is a miss.

Note:
    A miss is a regular JSON Reply with status 404, not a Failure: JSON
    clients always get a JSON body, regardless of the debug flag.
"""

import logging

from routedemo.fixtures import Fixtures
from routedemo.outcomes import Reply
from routedemo.schemas.responses import UserNotFoundResponse, UserResponse

logger = logging.getLogger(__name__)


class UserService:

    def lookup(self, fixtures: Fixtures, user_id: str) -> Reply:
        user = fixtures.sample_user
        if user is None:
            logger.info("User %s not found", user_id)
            return Reply.json(UserNotFoundResponse().model_dump(), status_code=404)

        return Reply.json(UserResponse(name=user.name, surname=user.surname).model_dump())


user_service = UserService()
