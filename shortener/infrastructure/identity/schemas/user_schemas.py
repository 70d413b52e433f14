"""Pydantic schemas for user API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserRegisterRequest(BaseModel):
    """Schema for user registration request."""

    first_name: str = Field(..., min_length=1, max_length=100, description="Given name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Family name")
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password (min 8 chars, one uppercase, one symbol)")


class UserDetailsResponse(BaseModel):
    """Schema for user details response."""

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime | None = None
