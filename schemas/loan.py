from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from schemas.common import WIRE_CONFIG, FileUpload, PayloadModel


class CategoryRef(BaseModel):
    """The category a loan belongs to; populated by the backend or just its id."""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None

    model_config = WIRE_CONFIG


class Loan(BaseModel):
    id: str
    # null when the category was deleted after the loan was created
    category: Optional[CategoryRef] = None
    title: str = Field(..., alias="loanTitle")
    company_name: str = Field(..., alias="loanCompany")
    bank_name: Optional[str] = None
    # URL of the stored logo
    bank_logo: Optional[str] = None
    description: str = Field("", alias="loanDescription")
    quote: str = Field("", alias="loanQuote")
    external_link: str = Field("", alias="link")
    is_active: bool = True
    status: Optional[str] = None
    amount: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = WIRE_CONFIG

    @field_validator("category", mode="before")
    @classmethod
    def _category_from_id(cls, v: Any) -> Any:
        if isinstance(v, str):
            return {"_id": v}
        return v


class LoanCreate(PayloadModel):
    category: str = Field(..., min_length=1, description="Category id")
    title: str = Field(..., alias="loanTitle")
    company_name: str = Field(..., alias="loanCompany")
    bank_name: str
    bank_logo: FileUpload
    description: str = Field(..., alias="loanDescription")
    quote: str = Field(..., alias="loanQuote")
    external_link: str = Field(..., alias="link")
    is_active: Optional[bool] = None


class LoanUpdate(PayloadModel):
    """Partial update. Leaving `bank_logo` unset keeps the stored logo."""
    category: Optional[str] = None
    title: Optional[str] = Field(None, alias="loanTitle")
    company_name: Optional[str] = Field(None, alias="loanCompany")
    bank_name: Optional[str] = None
    bank_logo: Optional[FileUpload] = None
    description: Optional[str] = Field(None, alias="loanDescription")
    quote: Optional[str] = Field(None, alias="loanQuote")
    external_link: Optional[str] = Field(None, alias="link")
    is_active: Optional[bool] = None
