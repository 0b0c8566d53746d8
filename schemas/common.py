from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel

from utils.case import to_camel_key

# snake_case in Python, camelCase (and `_id`) on the wire
WIRE_CONFIG = {"populate_by_name": True, "alias_generator": to_camel_key}


class FileUpload(BaseModel):
    """A binary field value; its presence switches the request to multipart encoding."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "FileUpload":
        p = Path(path)
        guessed, _ = mimetypes.guess_type(p.name)
        return cls(
            filename=p.name,
            content=p.read_bytes(),
            content_type=content_type or guessed or "application/octet-stream",
        )

    def as_httpx_file(self) -> tuple[str, bytes, str]:
        return (self.filename, self.content, self.content_type)


class MessageResponse(BaseModel):
    """Confirmation body returned by delete operations."""
    message: Optional[str] = None


class PayloadModel(BaseModel):
    """Request payload. Fields left as None are absent and never sent."""

    model_config = WIRE_CONFIG

    def to_fields(self) -> dict[str, Any]:
        """Wire-named fields; file values are kept as FileUpload for the executor to encode."""
        files = {name for name, value in self if isinstance(value, FileUpload)}
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude=files)
        for name in files:
            data[type(self).model_fields[name].alias or name] = getattr(self, name)
        return data
