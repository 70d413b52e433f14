from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Schema for a login request."""

    email: str
    password: str


class TokenResponse(BaseModel):
    """Access token returned by login and refresh; the refresh secret travels in a cookie."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class MessageResponse(BaseModel):
    message: str
