from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from schemas.common import MessageResponse, PayloadModel
from services.request_executor import RequestError, RequestExecutor

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_response(model: type[ModelT], value: Any, fallback: str, payload: Any) -> ModelT:
    """Validate part of a successful response; an unexpected shape is a failed request."""
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise RequestError(fallback, payload=payload) from e


class ResourceApi(Generic[ModelT]):
    """
    CRUD operations against one backend collection.
    Subclasses fix the path, the response envelope keys and the fallback message nouns.
    """

    path: str
    model: type[ModelT]
    list_key: str
    item_key: str
    singular: str
    plural: str

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    def _item_path(self, item_id: str) -> str:
        return f"{self.path}/{quote(item_id, safe='')}"

    def _unwrap_item(self, data: dict[str, Any], fallback: str) -> ModelT:
        item = data.get(self.item_key)
        if item is None:
            raise RequestError(fallback, payload=data)
        return parse_response(self.model, item, fallback, data)

    def _unwrap_list(self, data: dict[str, Any], fallback: str) -> list[ModelT]:
        items = data.get(self.list_key) or []
        if not isinstance(items, list):
            raise RequestError(fallback, payload=data)
        return [parse_response(self.model, x, fallback, data) for x in items]

    async def _list(self, params: Optional[dict[str, Any]] = None) -> list[ModelT]:
        msg = f"Failed to fetch {self.plural}"
        data = await self.executor.get(self.path, params=params, fallback_message=msg)
        return self._unwrap_list(data, msg)

    async def get(self, item_id: str) -> ModelT:
        msg = f"Failed to fetch {self.singular}"
        data = await self.executor.get(self._item_path(item_id), fallback_message=msg)
        return self._unwrap_item(data, msg)

    async def create(self, payload: PayloadModel) -> ModelT:
        msg = f"Failed to create {self.singular}"
        data = await self.executor.post(self.path, body=payload.to_fields(), fallback_message=msg)
        return self._unwrap_item(data, msg)

    async def update(self, item_id: str, payload: PayloadModel) -> ModelT:
        msg = f"Failed to update {self.singular}"
        data = await self.executor.put(
            self._item_path(item_id), body=payload.to_fields(), fallback_message=msg
        )
        return self._unwrap_item(data, msg)

    async def delete(self, item_id: str) -> MessageResponse:
        msg = f"Failed to delete {self.singular}"
        data = await self.executor.delete(self._item_path(item_id), fallback_message=msg)
        return parse_response(MessageResponse, data, msg, data)
