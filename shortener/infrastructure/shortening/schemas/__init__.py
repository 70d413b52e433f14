"""Shortening API schemas."""

from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    """Schema for a shorten request."""

    url: str = Field(..., description="Absolute http(s) URL to shorten")


class ShortUrlResponse(BaseModel):
    """Schema for a created short URL."""

    id: str
    code: str = Field(..., description="Generated short code")
    url: str = Field(..., description="Target URL")
    short_url: str = Field(..., description="Public link that redirects to the target")
