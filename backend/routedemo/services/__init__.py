# Services package init
"""
RouteDemo Backend — Services Layer
===================================

What:  Business logic layer sitting between routes (HTTP) and data (fixtures, files).
Why:   Separation of concerns — routes handle HTTP, services handle the rules.
How:   Services take plain values (fixtures, ids, names, bytes) and return
       Reply / Failure outcomes; they never build HTTP responses themselves.

Service Inventory:
    - BlogService:     post listing and single-post pages
    - FeedbackService: feedback form submission
    - UserService:     JSON user lookup
    - FileService:     multipart upload and raw-body push into storage
"""

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """
    True for a missing parameter, an empty string or "0".

    Matches the emptiness test the feedback form and the push endpoint have
    always used, where a lone "0" counts as nothing posted.
    """
    return value is None or value in ("", "0")
