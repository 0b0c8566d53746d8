from schemas.apply_now import ApplyNowCreate, ApplyNowSetting, ApplyNowUpdate, Region
from schemas.auth import AuthResponse, LoginRequest, Principal, SignupRequest
from schemas.category import Category, CategoryCreate, CategoryUpdate
from schemas.common import FileUpload, MessageResponse, PayloadModel
from schemas.commodity_price import (
    CommodityPrice,
    CommodityPriceCreate,
    CommodityPriceFilter,
    CommodityPriceUpdate,
    CommodityType,
)
from schemas.loan import CategoryRef, Loan, LoanCreate, LoanUpdate

__all__ = [
    "ApplyNowCreate",
    "ApplyNowSetting",
    "ApplyNowUpdate",
    "Region",
    "AuthResponse",
    "LoginRequest",
    "Principal",
    "SignupRequest",
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "FileUpload",
    "MessageResponse",
    "PayloadModel",
    "CommodityPrice",
    "CommodityPriceCreate",
    "CommodityPriceFilter",
    "CommodityPriceUpdate",
    "CommodityType",
    "CategoryRef",
    "Loan",
    "LoanCreate",
    "LoanUpdate",
]
