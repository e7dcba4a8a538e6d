from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RegisterRequest(BaseModel):
    # fields are checked by AccountService so the error messages and order stay fixed
    username: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class AccountPublic(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    username: str
    email: str
    phone: str | None = None
    created_at: datetime | None = None


class RegisterResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    message: str
    user_id: int


class LoginResponse(BaseModel):
    success: bool = True
    message: str
    user: AccountPublic
