"""Translation of AppError values into HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

from shortener.application.common.errors import AppError, ErrorKind
from shortener.exceptions import ApiError

logger = structlog.get_logger(__name__)

ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    # Validation
    ErrorKind.INVALID_URL: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_VALUE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PASSWORD_TOO_SHORT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PASSWORD_TOO_LONG: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PASSWORD_TOO_WEAK: status.HTTP_400_BAD_REQUEST,
    ErrorKind.REQUEST_VALIDATION: status.HTTP_400_BAD_REQUEST,
    # Authentication and sessions
    ErrorKind.INVALID_REFRESH_SECRET: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.SESSION_NOT_ACTIVE: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NO_ACTIVE_REFRESH_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.SESSION_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.REFRESH_TOKEN_REUSE_DETECTED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_SESSION: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_ACCESS_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    # Lookup and conflicts
    ErrorKind.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.DUPLICATE_CODE: status.HTTP_409_CONFLICT,
    # Server side
    ErrorKind.OPERATION_TIMEOUT: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.MAX_CODE_GENERATION_ATTEMPTS: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UNSUPPORTED_HMAC_ALGORITHM: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.IMMUTABLE_CODE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Shown instead of the internal message on 5xx responses
PUBLIC_MESSAGES: dict[int, str] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: "An unexpected error occurred. Please try again later.",
    status.HTTP_503_SERVICE_UNAVAILABLE: "The service is temporarily unavailable. Please retry.",
}


def status_for(kind: ErrorKind) -> int:
    return ERROR_STATUS_CODES[kind]


def to_api_error(error: AppError) -> ApiError:
    """Wrap an AppError for the HTTP layer, hiding internal detail on 5xx."""
    status_code = status_for(error.kind)
    message = PUBLIC_MESSAGES.get(status_code, error.message)
    return ApiError(message, status_code, error.kind, error)


def error_body(kind: ErrorKind, message: str) -> dict[str, str]:
    return {"code": str(kind), "message": message}


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "request_failed",
            path=request.url.path,
            status_code=exc.status_code,
            error=str(exc.error) if exc.error else exc.message,
            category=str(exc.error.category) if exc.error else None,
            details=exc.error.details if exc.error else None,
            exc_info=exc.error.cause if exc.error else None,
        )
    else:
        logger.info(
            "request_rejected",
            path=request.url.path,
            status_code=exc.status_code,
            code=str(exc.kind),
        )

    response = JSONResponse(status_code=exc.status_code, content=error_body(exc.kind, exc.message))
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        response.headers["WWW-Authenticate"] = "Bearer"
    for name, value in exc.headers.items():
        response.headers.append(name, value)
    return response


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    logger.info("request_validation_failed", path=request.url.path, errors=len(errors))
    return JSONResponse(
        status_code=ERROR_STATUS_CODES[ErrorKind.REQUEST_VALIDATION],
        content=error_body(ErrorKind.REQUEST_VALIDATION, message),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=ERROR_STATUS_CODES[ErrorKind.INTERNAL],
        content=error_body(
            ErrorKind.INTERNAL, PUBLIC_MESSAGES[status.HTTP_500_INTERNAL_SERVER_ERROR]
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
