"""
Commodity price client: filters and validation.
Run from the project root: python -m pytest tests/test_commodity_prices.py -v
"""
import unittest

from pydantic import ValidationError

from schemas.commodity_price import (
    CommodityPriceCreate,
    CommodityPriceFilter,
    CommodityPriceUpdate,
    CommodityType,
)
from tests.fake_backend import create_app, logged_in_client

ROWS = [
    (CommodityType.PETROL, "Maharashtra", "Mumbai", 104.2, "litre"),
    (CommodityType.PETROL, "Maharashtra", "Pune", 103.9, "litre"),
    (CommodityType.PETROL, "Karnataka", "Bengaluru", 101.9, "litre"),
    (CommodityType.DIESEL, "Maharashtra", "Mumbai", 92.1, "litre"),
    (CommodityType.LP_GAS, "Delhi", "New Delhi", 803.0, "cylinder"),
]


class TestCommodityPricesApi(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.app = create_app()
        self.client = await logged_in_client(self.app)
        self.api = self.client.commodity_prices
        self.created = []
        for commodity_type, state, city, price, unit in ROWS:
            self.created.append(
                await self.api.create(
                    CommodityPriceCreate(commodity_type=commodity_type, state=state, city=city, price=price, unit=unit)
                )
            )

    async def asyncTearDown(self):
        await self.client.aclose()

    async def test_no_filter_returns_everything(self):
        self.assertEqual(len(await self.api.list()), len(ROWS))
        self.assertEqual(len(await self.api.list(CommodityPriceFilter())), len(ROWS))
        self.assertEqual(self.app.state.requests[-1]["query"], {})

    async def test_filters_are_and_combined(self):
        found = await self.api.list(CommodityPriceFilter(commodity_type=CommodityType.PETROL, state="Maharashtra"))
        self.assertEqual(sorted(p.city for p in found), ["Mumbai", "Pune"])
        self.assertTrue(all(p.commodity_type is CommodityType.PETROL for p in found))
        self.assertEqual(self.app.state.requests[-1]["query"], {"commodityType": "Petrol", "state": "Maharashtra"})

    async def test_empty_string_predicate_is_not_sent(self):
        found = await self.api.list(CommodityPriceFilter(state="", city="Mumbai"))
        self.assertEqual(len(found), 2)
        self.assertEqual(self.app.state.requests[-1]["query"], {"city": "Mumbai"})

    async def test_active_filter(self):
        await self.api.update(self.created[0].id, CommodityPriceUpdate(is_active=False))
        inactive = await self.api.list(CommodityPriceFilter(is_active=False))
        self.assertEqual([p.id for p in inactive], [self.created[0].id])
        self.assertEqual(len(await self.api.list(CommodityPriceFilter(is_active=True))), len(ROWS) - 1)

    async def test_lp_gas_round_trips_with_its_wire_name(self):
        found = await self.api.list(CommodityPriceFilter(commodity_type=CommodityType.LP_GAS))
        self.assertEqual(len(found), 1)
        self.assertEqual(self.app.state.commodity_prices[found[0].id]["commodityType"], "LP Gas")

    async def test_partial_update(self):
        target = self.created[3]
        await self.api.update(target.id, CommodityPriceUpdate(price=95.5))
        fetched = await self.api.get(target.id)
        self.assertEqual(fetched.price, 95.5)
        self.assertEqual(fetched.city, target.city)
        self.assertEqual(fetched.unit, target.unit)
        self.assertTrue(fetched.is_active)

    async def test_negative_price_is_rejected_before_sending(self):
        sent = len(self.app.state.requests)
        with self.assertRaises(ValidationError):
            CommodityPriceCreate(commodity_type="Silver", state="Goa", city="Panaji", price=-1, unit="kg")
        self.assertEqual(len(self.app.state.requests), sent)

    async def test_unknown_commodity_type_is_rejected(self):
        with self.assertRaises(ValidationError):
            CommodityPriceFilter(commodity_type="Copper")

    async def test_delete(self):
        await self.api.delete(self.created[0].id)
        self.assertEqual(len(await self.api.list()), len(ROWS) - 1)


if __name__ == "__main__":
    unittest.main()
