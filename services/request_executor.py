"""
Request executor: the single chokepoint for every call to the admin backend.

Encodes the body (JSON, or multipart when a file field is present), attaches the
session's bearer token, decodes the JSON response and turns any failure into a
RequestError. One attempt per call; no retries.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

import httpx

from schemas.common import FileUpload
from services.session_store import SessionStore
from utils.forms import compact, form_value, query_params

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_MESSAGE = "Request failed"


class RequestError(Exception):
    """A failed call. `message` is the server's message when it sent one."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class TransportError(RequestError):
    """No response was received at all (connection refused, DNS failure, broken stream)."""


@dataclass(frozen=True)
class JsonBody:
    data: dict[str, Any]


@dataclass(frozen=True)
class MultipartBody:
    fields: dict[str, str] = field(default_factory=dict)
    files: dict[str, FileUpload] = field(default_factory=dict)


Body = Union[JsonBody, MultipartBody]


def encode_body(fields: Optional[Mapping[str, Any]]) -> Optional[Body]:
    """Pick the encoding once per call: multipart iff any field holds a file."""
    if fields is None:
        return None
    present = compact(fields)
    files = {k: v for k, v in present.items() if isinstance(v, FileUpload)}
    if not files:
        return JsonBody(present)
    return MultipartBody(
        fields={k: form_value(v) for k, v in present.items() if k not in files},
        files=files,
    )


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}


def _error_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return fallback


class RequestExecutor:
    def __init__(
        self,
        session: SessionStore,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self, body: Optional[Body]) -> dict[str, str]:
        headers: dict[str, str] = {}
        # multipart lets httpx write the boundary into Content-Type
        if not isinstance(body, MultipartBody):
            headers["Content-Type"] = "application/json"
        token = self.session.credential
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        fallback_message: str = DEFAULT_FALLBACK_MESSAGE,
    ) -> dict[str, Any]:
        encoded = encode_body(body)
        kwargs: dict[str, Any] = {"headers": self._headers(encoded)}
        if params:
            kwargs["params"] = query_params(params)
        if isinstance(encoded, JsonBody):
            kwargs["json"] = encoded.data
        elif isinstance(encoded, MultipartBody):
            kwargs["data"] = encoded.fields
            kwargs["files"] = {k: f.as_httpx_file() for k, f in encoded.files.items()}

        logger.debug(
            "%s %s (%s, authenticated=%s)",
            method,
            path,
            type(encoded).__name__ if encoded else "no body",
            self.session.is_authenticated,
        )
        try:
            response = await self._client.request(method, self._url(path), **kwargs)
        except httpx.TransportError as e:
            logger.warning("%s %s: no response (%s)", method, path, e)
            raise TransportError(fallback_message) from e

        payload = _decode(response)
        if not response.is_success:
            message = _error_message(payload, fallback_message)
            logger.warning("%s %s failed with %s: %s", method, path, response.status_code, message)
            raise RequestError(message, status_code=response.status_code, payload=payload)
        if not isinstance(payload, dict):
            logger.warning("%s %s returned a non-object body", method, path)
            raise RequestError(fallback_message, status_code=response.status_code, payload=payload)
        return payload

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return await self.request("DELETE", path, **kwargs)
