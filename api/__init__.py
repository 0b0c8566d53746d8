from api.apply_now import ApplyNowApi
from api.auth import AuthApi
from api.categories import CategoriesApi
from api.commodity_prices import CommodityPricesApi
from api.loans import LoansApi

__all__ = [
    "ApplyNowApi",
    "AuthApi",
    "CategoriesApi",
    "CommodityPricesApi",
    "LoansApi",
]
