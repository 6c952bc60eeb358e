"""
RouteDemo Backend — Pydantic Response Schemas
==============================================

What:  Pydantic models for every JSON body the API returns.
Why:   One definition per payload shape: services build bodies from these
       models and routes reference them in their OpenAPI `responses`.
How:   Services call `.model_dump()` to get the dict carried by a JSON Reply.

The HTML endpoints (/, /hello, /blog, /feedback) have no schema; their bodies
are plain text fragments.
"""

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# User lookup — GET /users.json/{id}
# ══════════════════════════════════════════════════════════════════════════


class UserResponse(BaseModel):
    name: str = Field(description="First name")
    surname: str = Field(description="Last name")


class UserNotFoundResponse(BaseModel):
    """Returned with HTTP 404 when no user matches the requested id."""

    message: str = Field(default="The user was not found.")


# ══════════════════════════════════════════════════════════════════════════
# Uploads — POST /upload and POST /push
# ══════════════════════════════════════════════════════════════════════════


class UploadResponse(BaseModel):
    response: str = Field(default="OK", description="Always 'OK' on success")


class PushResponse(BaseModel):
    """
    Returned by POST /push.

    Echoes the stored name so clients that generated it can confirm the
    write landed where they expected.
    """

    response: str = Field(default="OK")
    name: str = Field(description="Name the pushed file was stored under")


# ══════════════════════════════════════════════════════════════════════════
# Health — GET /health
# ══════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """
    Health check response showing service status.

    A service whose storage directory is not writable cannot serve either
    upload endpoint, so that case is reported as "degraded".
    """

    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    storage: str = Field(description="Storage directory: writable, unwritable")
    debug: bool = Field(description="Whether detailed diagnostics are shown to clients")
    uptime_seconds: float = Field(description="Seconds since service started")
