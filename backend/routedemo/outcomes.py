"""
RouteDemo Backend — Handler Outcomes
=====================================

What:  The values handlers and services return instead of raising.
Why:   Expected failures (missing post, empty feedback, duplicate push) are
       ordinary results of a request, not exceptional control flow. Returning
       them keeps every handler's exits visible in its signature and leaves a
       single place, routedemo.rendering, to turn them into responses.
How:   A handler returns either a `Reply` (body + status + media type) or a
       `Failure` (error kind + message + optional context). Faults raised by
       the framework itself are converted to `Failure` by the exception hooks
       in routedemo.main and rendered the same way.

Outcome Kinds:
    ErrorKind
    ├── NOT_FOUND        → 404 (missing resource, unmatched route)
    ├── INTERNAL_ERROR   → 500 (empty feedback, missing/duplicate push name,
    │                           storage I/O failure)
    └── UNHANDLED        → framework status (405 wrong method, 500 exception)
"""

import enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"
    UNHANDLED = "unhandled"

    @property
    def default_status(self) -> int:
        return 404 if self is ErrorKind.NOT_FOUND else 500


class MediaType(str, enum.Enum):
    HTML = "html"
    JSON = "json"


class Reply(BaseModel):
    """
    A response a handler chose to send.

    Attributes:
        body:        HTML text, or a JSON-serializable dict for MediaType.JSON
        status_code: HTTP status (JSON lookups use 404 here for "user not found",
                     which is a regular reply, not a failure)
        media_type:  How the body is encoded
    """

    body: Union[str, Dict[str, Any]]
    status_code: int = Field(default=200, ge=100, le=599)
    media_type: MediaType = MediaType.HTML

    model_config = {"frozen": True}

    @classmethod
    def html(cls, body: str, status_code: int = 200) -> "Reply":
        return cls(body=body, status_code=status_code, media_type=MediaType.HTML)

    @classmethod
    def json(cls, body: Dict[str, Any], status_code: int = 200) -> "Reply":
        return cls(body=body, status_code=status_code, media_type=MediaType.JSON)


class Failure(BaseModel):
    """
    A request that could not be served.

    Attributes:
        kind:     Result class of the failure
        message:  Developer-facing description; shown to clients only in debug mode
        context:  Extra debug info (logged, NEVER returned to the client)
        status:   Explicit HTTP status; defaults to the kind's status
        headers:  Headers the framework attached (e.g. Allow on a 405)
    """

    kind: ErrorKind
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)
    status: Optional[int] = Field(default=None, ge=400, le=599)
    headers: Dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def status_code(self) -> int:
        return self.status if self.status is not None else self.kind.default_status

    @classmethod
    def not_found(cls, message: str, **context: Any) -> "Failure":
        return cls(kind=ErrorKind.NOT_FOUND, message=message, context=context)

    @classmethod
    def internal_error(cls, message: str, **context: Any) -> "Failure":
        return cls(kind=ErrorKind.INTERNAL_ERROR, message=message, context=context)

    @classmethod
    def from_status(
        cls,
        status_code: int,
        message: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> "Failure":
        """Wrap a status raised by the framework (unmatched route, wrong method)."""
        kind = ErrorKind.NOT_FOUND if status_code == 404 else ErrorKind.UNHANDLED
        return cls(kind=kind, message=message, status=status_code, headers=headers or {})


Outcome = Union[Reply, Failure]
