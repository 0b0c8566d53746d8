"""
Key-case helper for the backend's camelCase wire format.
Uses Pydantic's alias_generators for consistency with schema validation.
"""
from pydantic.alias_generators import to_camel


def to_camel_key(s: str) -> str:
    """Convert a single snake_case key to camelCase; `id` maps to the backend's `_id`."""
    if s == "id":
        return "_id"
    return to_camel(s)
