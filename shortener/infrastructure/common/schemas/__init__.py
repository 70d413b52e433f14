"""Common infrastructure schemas."""

from shortener.infrastructure.common.schemas.error_schemas import ErrorResponse

__all__ = ["ErrorResponse"]
