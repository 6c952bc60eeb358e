"""
RouteDemo Backend — Constrained Placeholder Segments
=====================================================

What:  Registers the path convertors used by the route table.
Why:   A placeholder such as {name} in /hello/{name} must only match when the
       segment satisfies a regular expression. A FastAPI `Path(pattern=...)`
       check runs after matching and answers 422; a Starlette convertor takes
       part in matching itself, so a non-matching segment leaves the route
       unmatched and the request falls through to 404.
How:   Each constraint becomes a StringConvertor subclass with its own regex,
       registered under a short name usable in paths: "/hello/{name:alpha}".
       Starlette anchors the compiled path regex, so the constraint always has
       to match the whole segment.

Convertors in use:
    alpha  → [A-Za-z]+   (registered here)
    digits → [0-9]+      (registered here; stays a string so "01" is not "1")
"""

import logging
import re

from starlette.convertors import CONVERTOR_TYPES, StringConvertor, register_url_convertor

logger = logging.getLogger(__name__)


def register_constraint(name: str, regex: str) -> str:
    """
    Register a string placeholder constrained by `regex` under `name`.

    Returns the name so route modules can build paths from it. Registering the
    same name with the same regex twice is a no-op; a different regex raises.
    """
    re.compile(regex)  # fail at import time on a malformed pattern

    existing = CONVERTOR_TYPES.get(name)
    if existing is not None:
        if existing.regex != regex:
            raise ValueError(
                f"Path convertor '{name}' is already registered with regex {existing.regex!r}"
            )
        return name

    convertor_cls = type(f"{name.title()}Convertor", (StringConvertor,), {"regex": regex})
    register_url_convertor(name, convertor_cls())
    logger.debug("Registered path convertor %s=%s", name, regex)
    return name


ALPHA = register_constraint("alpha", "[A-Za-z]+")
DIGITS = register_constraint("digits", "[0-9]+")
