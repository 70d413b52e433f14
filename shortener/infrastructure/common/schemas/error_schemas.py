from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    code: str = Field(..., description="Machine-readable error code", examples=["INVALID_URL"])
    message: str = Field(..., description="Human-readable explanation")
