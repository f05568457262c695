from __future__ import annotations

import types
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple, Union, get_args, get_origin

import httpx
from pydantic import BaseModel

from .errors import InvalidURLError, OptionsEncodeError
from .timestamps import format_timestamp


@dataclass(frozen=True)
class Query:
    """
    Declarative query-parameter tag for option model fields.

        activity_type_ids: Annotated[List[int], Query("activityTypeId[]")] = ...

    ``omitempty`` skips zero values ("", 0, False, empty sequences) on
    non-optional fields. ``None`` is never sent.
    """

    name: str
    omitempty: bool = True


def _is_optional(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return type(None) in get_args(annotation)
    return False


def _render(value: Any, field_name: str) -> Optional[str]:
    """Render a scalar; None means the rendering is empty and the pair is dropped."""
    if isinstance(value, Enum):
        value = value.value
        if value == "" or value is None:
            return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    raise OptionsEncodeError(
        f"unsupported query value for field {field_name!r}: {type(value).__name__}"
    )


def _is_zero(value: Any) -> bool:
    if isinstance(value, Enum):
        value = value.value
    return value == "" or value is False or (value == 0 and not isinstance(value, str))


def encode_options(options: Optional[BaseModel]) -> List[Tuple[str, str]]:
    """
    Encode an options model into ordered (name, value) query pairs.
    - Sequences emit one pair per element, preserving order
    - Enums use their canonical text; an empty rendering is omitted
    """
    if options is None:
        return []
    if not isinstance(options, BaseModel):
        raise OptionsEncodeError(
            f"options must be a pydantic model, got {type(options).__name__}"
        )

    pairs: List[Tuple[str, str]] = []
    for field_name, field in type(options).model_fields.items():
        tag = next((m for m in field.metadata if isinstance(m, Query)), None)
        if tag is None:
            tag = Query(field.alias or field_name, omitempty=False)
        if not tag.name or "," in tag.name or "=" in tag.name or "&" in tag.name:
            raise OptionsEncodeError(
                f"malformed query tag {tag.name!r} on field {field_name!r}"
            )

        value = getattr(options, field_name)
        if value is None:
            continue

        if isinstance(value, (list, tuple)):
            if not value and tag.omitempty:
                continue
            for item in value:
                rendered = _render(item, field_name)
                if rendered is not None:
                    pairs.append((tag.name, rendered))
            continue

        if isinstance(value, (dict, set, BaseModel)):
            raise OptionsEncodeError(
                f"unsupported query value for field {field_name!r}: "
                f"{type(value).__name__}"
            )

        if tag.omitempty and not _is_optional(field.annotation) and _is_zero(value):
            continue

        rendered = _render(value, field_name)
        if rendered is not None:
            pairs.append((tag.name, rendered))

    return pairs


def append_query(url: str, pairs: Sequence[Tuple[str, str]]) -> str:
    """Append ``pairs`` to ``url`` after any query parameters it already has."""
    if not pairs:
        return url
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(f"Invalid URL {url!r}: {exc}") from exc

    merged = list(parsed.params.multi_items()) + list(pairs)
    return str(parsed.copy_with(params=httpx.QueryParams(merged)))


def add_options(url: str, options: Optional[BaseModel]) -> str:
    """Append encoded options to ``url``, keeping any query it already has."""
    if options is None:
        return url
    return append_query(url, encode_options(options))


__all__ = ["Query", "encode_options", "add_options", "append_query"]
