from __future__ import annotations

from typing import Any, Union
from urllib.parse import quote

from .errors import InvalidIdentifierError

# Numeric project/repository ID or textual key/name.
IDOrKey = Union[int, str]

API_PREFIX = "api/v2"


def render_identifier(value: Any) -> str:
    """
    Render an ID-or-key into a single URL path segment.
    - int -> decimal form (bool is rejected even though it subclasses int)
    - non-empty str -> verbatim; percent-encoding is left to api_path
    """
    if isinstance(value, bool):
        raise InvalidIdentifierError(
            f"identifier must be int or non-empty str, got {type(value).__name__}"
        )
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value:
        return value
    raise InvalidIdentifierError(
        f"identifier must be int or non-empty str, got {value!r}"
    )


def api_path(*segments: Any) -> str:
    """
    Compose a relative API path from segments.
    Example: api_path("projects", "SRE", "categories") -> 'api/v2/projects/SRE/categories'
    """
    rendered = [quote(render_identifier(s), safe="") for s in segments]
    return "/".join([API_PREFIX, *rendered])


__all__ = ["IDOrKey", "API_PREFIX", "render_identifier", "api_path"]
