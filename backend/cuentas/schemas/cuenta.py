from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional

from ..models.cuenta import Role


# Input fields are deliberately loose: the account manager owns validation
# and reports every problem as a ValidationError result.

class AccountCreate(BaseModel):
    username: str = ""
    password: str = ""
    email: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    role: int = Role.PATIENT


class AccountUpdate(BaseModel):
    id: int
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    role: Optional[int] = None


class AccountResponse(BaseModel):
    """Public view of an account. Never carries the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    role: int
    created_at: Optional[datetime] = None


class AccountCreatedResponse(BaseModel):
    message: str
    id: int


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account: AccountResponse
