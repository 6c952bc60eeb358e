"""
RouteDemo Backend — Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and returns an immutable `Settings` object.
Who:   Built once by the app factory and handed to handlers through
       FastAPI dependencies (see routedemo.context).
When:  Loaded once at startup; never mutated afterwards.

Design Decision:
    There is no module-level settings singleton. `create_app()` receives a
    Settings instance (or loads one) and stores it on `app.state`, so tests
    can build apps with debug on and off side by side.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development. Attributes are
    grouped by concern for readability.
    """

    # ── Diagnostics ───────────────────────────────────────────────────────
    # What: Controls how failures are shown to clients
    # Off: fixed "page not found" / "something went terribly wrong" texts
    # On:  the failure message, or Starlette's traceback page for exceptions
    debug: bool = Field(default=False)

    # ── File Storage ──────────────────────────────────────────────────────
    # What: Directory both upload endpoints write into, relative to the CWD
    storage_root: str = Field(default="./files")

    # What: Chunk size used when copying multipart uploads to disk
    upload_chunk_size: int = Field(default=64 * 1024, ge=1024, le=8 * 1024 * 1024)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (split by cors_origins_list)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("storage_root")
    @classmethod
    def validate_storage_root(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("storage_root must not be empty")
        return v

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DEBUG and debug both work
        "frozen": True,
    }


def load_settings() -> Settings:
    """Read settings from the environment (and .env, when present)."""
    return Settings()
