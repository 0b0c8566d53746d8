from __future__ import annotations

from schemas.category import Category, CategoryCreate, CategoryUpdate

from api.base import ResourceApi


class CategoriesApi(ResourceApi[Category]):
    path = "/admin/categories"
    model = Category
    list_key = "categories"
    item_key = "category"
    singular = "category"
    plural = "categories"

    async def list(self) -> list[Category]:
        return await self._list()

    async def create(self, payload: CategoryCreate) -> Category:
        return await super().create(payload)

    async def update(self, item_id: str, payload: CategoryUpdate) -> Category:
        return await super().update(item_id, payload)
