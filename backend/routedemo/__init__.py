"""
RouteDemo Backend — Application Package Initializer
====================================================

What: Marks the `routedemo` directory as a Python package.
Why:  Enables module imports like `from routedemo.config import Settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    A tour of a micro web framework's routing and request/response primitives,
    laid out in the same layers a larger service would use:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← return Reply / Failure values
    ├─────────────────────────────────────┤
    │       Fixtures & Schemas (Data)     │  ← read-only sample data + Pydantic
    ├─────────────────────────────────────┤
    │        Storage (files/ directory)   │  ← uploads written with aiofiles
    └─────────────────────────────────────┘

    Every route hands its outcome to routedemo.rendering, the one place where
    results and failures become HTTP responses.
"""

__version__ = "1.0.0"
