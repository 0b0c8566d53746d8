from __future__ import annotations

from typing import Optional

from schemas.commodity_price import (
    CommodityPrice,
    CommodityPriceCreate,
    CommodityPriceFilter,
    CommodityPriceUpdate,
)

from api.base import ResourceApi


class CommodityPricesApi(ResourceApi[CommodityPrice]):
    path = "/admin/commodity-prices"
    model = CommodityPrice
    list_key = "commodityPrices"
    item_key = "commodityPrice"
    singular = "commodity price"
    plural = "commodity prices"

    async def list(self, filters: Optional[CommodityPriceFilter] = None) -> list[CommodityPrice]:
        return await self._list(filters.to_fields() if filters else None)

    async def create(self, payload: CommodityPriceCreate) -> CommodityPrice:
        return await super().create(payload)

    async def update(self, item_id: str, payload: CommodityPriceUpdate) -> CommodityPrice:
        return await super().update(item_id, payload)
