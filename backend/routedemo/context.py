"""
RouteDemo Backend — Request Context & Dependencies
===================================================

What:  A structured, read-only view of the incoming request plus the FastAPI
       dependencies that hand handlers their configuration.
Why:   Handlers declare exactly what they consume. Instead of receiving the
       framework's Request object, a handler asks for a RequestContext built
       for its needs (form fields, raw body, or neither), and for Settings /
       Fixtures / FileService, which the app factory put on app.state.
How:   `form_context` parses the form (url-encoded or multipart),
       `body_context` reads the raw body, `request_context` reads neither.
       All three return the same RequestContext type.

Lookup order of RequestContext.get():
    path parameters → query string → form fields
    (the order of the classic "request parameter bag" accessor)
"""

from typing import Any, Dict, Optional

from fastapi import Request
from pydantic import BaseModel, Field
from starlette.datastructures import UploadFile

from routedemo.config import Settings
from routedemo.fixtures import Fixtures
from routedemo.services.file_service import FileService


class RequestContext(BaseModel):
    """
    Everything a handler may read from one request.

    Attributes:
        method:       HTTP method
        path:         Request path
        path_params:  Placeholder values bound by the router
        query:        Query-string parameters (last value wins)
        headers:      Request headers, lower-cased names
        form:         Text form fields (empty unless built by form_context)
        files:        Uploaded files by field name (form_context only)
        body:         Raw request body (body_context only)
        request_id:   Correlation ID assigned by RequestIDMiddleware
    """

    method: str
    path: str
    path_params: Dict[str, Any] = Field(default_factory=dict)
    query: Dict[str, str] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)
    form: Dict[str, str] = Field(default_factory=dict)
    files: Dict[str, UploadFile] = Field(default_factory=dict)
    body: bytes = b""
    request_id: str = ""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Look a parameter up in path params, then query string, then form."""
        for source in (self.path_params, self.query, self.form):
            if key in source:
                return source[key]
        return default

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.lower(), default)


def _base_fields(request: Request) -> Dict[str, Any]:
    return {
        "method": request.method,
        "path": request.url.path,
        "path_params": dict(request.path_params),
        "query": dict(request.query_params),
        "headers": {k.lower(): v for k, v in request.headers.items()},
        "request_id": getattr(request.state, "request_id", ""),
    }


async def request_context(request: Request) -> RequestContext:
    return RequestContext(**_base_fields(request))


async def form_context(request: Request) -> RequestContext:
    """Parse the form body; text fields go to `form`, uploads to `files`."""
    form = await request.form()
    fields: Dict[str, str] = {}
    files: Dict[str, UploadFile] = {}
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            files[key] = value
        else:
            fields[key] = value
    return RequestContext(**_base_fields(request), form=fields, files=files)


async def body_context(request: Request) -> RequestContext:
    """Read the raw body without interpreting it, whatever its content type."""
    body = await request.body()
    return RequestContext(**_base_fields(request), body=body)


# ── Application-scoped dependencies ───────────────────────────────────────


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_fixtures(request: Request) -> Fixtures:
    return request.app.state.fixtures


def get_file_service(request: Request) -> FileService:
    return request.app.state.file_service
