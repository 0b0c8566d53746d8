from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from schemas.common import WIRE_CONFIG, PayloadModel


class Region(str, Enum):
    """Regions with their own Apply Now button; GLOBAL is the unqualified setting."""
    GLOBAL = "global"
    USA = "usa"
    INDIA = "india"


class ApplyNowSetting(BaseModel):
    id: str
    is_active: bool
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = WIRE_CONFIG


class ApplyNowCreate(PayloadModel):
    is_active: bool
    description: Optional[str] = None


class ApplyNowUpdate(PayloadModel):
    is_active: Optional[bool] = None
    description: Optional[str] = None
