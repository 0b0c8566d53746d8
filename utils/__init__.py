"""Shared utilities for the client."""
from utils.case import to_camel_key
from utils.forms import compact, form_value, query_params

__all__ = [
    "to_camel_key",
    "compact",
    "form_value",
    "query_params",
]
