from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from schemas.common import PayloadModel


class Principal(BaseModel):
    """The authenticated admin, as returned under `admin`."""
    id: str = Field(..., validation_alias=AliasChoices("id", "_id"))
    display_name: str = Field(..., alias="username")
    email: str

    model_config = {"populate_by_name": True}


class LoginRequest(PayloadModel):
    email: str
    password: str


class SignupRequest(PayloadModel):
    username: str
    email: str
    password: str


class AuthResponse(BaseModel):
    token: Optional[str] = None
    admin: Optional[Principal] = None
    message: Optional[str] = None
