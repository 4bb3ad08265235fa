"""Pydantic schemas for API requests and responses."""

from latchkey.infrastructure.api.schemas.auth_schemas import (
    AccountResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)

__all__ = [
    "AccountResponse",
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
]
