"""Pydantic schemas for authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from latchkey.domain.entities import Role


class RegisterRequest(BaseModel):
    """Request body for account registration."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, max_length=1024, description="Account password")
    role: Role = Field(Role.USER, description="Account role")


class LoginRequest(BaseModel):
    """Request body for sign-in."""

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, max_length=1024, description="Account password")


class AccountResponse(BaseModel):
    """Sanitized account information."""

    id: int = Field(..., description="Account ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Account email address")
    role: Role = Field(..., description="Account role")
    created_at: datetime | None = Field(None, description="When the account was created")

    model_config = {"from_attributes": True}


class LoginResponse(AccountResponse):
    """Response for a successful sign-in."""

    token: str = Field(..., description="Session token, also set as a cookie")
    expires_in: int = Field(..., description="Session token lifetime in seconds")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Response body for every failed request."""

    error: str = Field(..., description="Stable error identifier")
    message: str = Field(..., description="Human-readable error message")
