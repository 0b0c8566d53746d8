from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import WIRE_CONFIG, PayloadModel


class CommodityType(str, Enum):
    SILVER = "Silver"
    INR = "INR"
    PETROL = "Petrol"
    DIESEL = "Diesel"
    LP_GAS = "LP Gas"


class CommodityPrice(BaseModel):
    id: str
    commodity_type: CommodityType
    state: str
    city: str
    price: float = Field(..., ge=0)
    unit: str
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = WIRE_CONFIG


class CommodityPriceCreate(PayloadModel):
    commodity_type: CommodityType
    state: str
    city: str
    price: float = Field(..., ge=0)
    unit: str
    is_active: Optional[bool] = None


class CommodityPriceUpdate(PayloadModel):
    commodity_type: Optional[CommodityType] = None
    state: Optional[str] = None
    city: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    is_active: Optional[bool] = None


class CommodityPriceFilter(PayloadModel):
    """Independent predicates, AND-combined by the backend. Unset predicates impose no constraint."""
    commodity_type: Optional[CommodityType] = None
    state: Optional[str] = None
    city: Optional[str] = None
    is_active: Optional[bool] = None
