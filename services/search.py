"""Client-side search over lists already fetched from the backend."""
from typing import Iterable, Optional

from schemas.category import Category
from schemas.commodity_price import CommodityPrice
from schemas.loan import Loan


def _matches(term: str, *values: Optional[str]) -> bool:
    needle = term.lower()
    return any(needle in (v or "").lower() for v in values)


def search_categories(categories: Iterable[Category], term: str = "") -> list[Category]:
    return [c for c in categories if _matches(term, c.name)]


def search_loans(loans: Iterable[Loan], term: str = "", category_id: Optional[str] = None) -> list[Loan]:
    """Match title or company, then keep one category if `category_id` is given."""
    found = [l for l in loans if _matches(term, l.title, l.company_name)]
    if category_id:
        found = [l for l in found if l.category is not None and l.category.id == category_id]
    return found


def search_commodity_prices(prices: Iterable[CommodityPrice], term: str = "") -> list[CommodityPrice]:
    return [p for p in prices if _matches(term, p.commodity_type.value, p.state, p.city)]
