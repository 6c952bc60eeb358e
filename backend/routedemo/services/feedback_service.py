"""
RouteDemo Backend — Feedback Service
=====================================

What:  Accepts a feedback message posted from a form.
Why:   Demonstrates a POST route that creates something (answers 201 Created)
       and a request parameter read through the RequestContext.

Nothing is stored; the message is only logged.
"""

import logging
from typing import Optional

from routedemo.outcomes import Failure, Outcome, Reply
from routedemo.services import is_blank

logger = logging.getLogger(__name__)

THANK_YOU = "Thank you for your feedback!<br />"


class FeedbackService:

    def submit(self, message: Optional[str]) -> Outcome:
        if is_blank(message):
            return Failure.internal_error(
                "Message is empty, have you posted a message variable?"
            )

        logger.info("Feedback received (%d characters)", len(message))
        return Reply.html(THANK_YOU, status_code=201)


feedback_service = FeedbackService()
