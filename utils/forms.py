"""Rendering of field values for query strings and multipart form bodies."""
from enum import Enum
from typing import Any, Mapping, Optional


def form_value(value: Any) -> str:
    """Render a scalar the way the backend expects it in form fields and query strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def compact(fields: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Drop absent (None) entries; absent fields are never sent."""
    if not fields:
        return {}
    return {k: v for k, v in fields.items() if v is not None}


def query_params(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Build query params, skipping None and empty strings."""
    return {k: form_value(v) for k, v in compact(params).items() if v != ""}
