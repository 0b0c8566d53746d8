from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import WIRE_CONFIG, PayloadModel


class Category(BaseModel):
    id: str
    name: str
    description: str = ""
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = WIRE_CONFIG


class CategoryCreate(PayloadModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    is_active: Optional[bool] = None


class CategoryUpdate(PayloadModel):
    """Partial update: only the fields given are sent."""
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
