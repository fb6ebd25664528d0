from .cuenta import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountCreatedResponse,
    LoginRequest,
    TokenResponse,
)

__all__ = [
    "AccountCreate",
    "AccountUpdate",
    "AccountResponse",
    "AccountCreatedResponse",
    "LoginRequest",
    "TokenResponse",
]
