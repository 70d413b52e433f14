"""Tests for the ErrorKind to HTTP status table."""

import pytest

from shortener.application.common.errors import (
    ErrorKind,
    application_error,
    domain_error,
    infrastructure_error,
)
from shortener.infrastructure.common.error_mapping import (
    ERROR_STATUS_CODES,
    PUBLIC_MESSAGES,
    status_for,
    to_api_error,
)


def test_every_kind_has_a_status() -> None:
    assert set(ERROR_STATUS_CODES) == set(ErrorKind)


@pytest.mark.parametrize(
    ("kind", "status_code"),
    [
        (ErrorKind.INVALID_URL, 400),
        (ErrorKind.REQUEST_VALIDATION, 400),
        (ErrorKind.INVALID_CREDENTIALS, 401),
        (ErrorKind.REFRESH_TOKEN_REUSE_DETECTED, 401),
        (ErrorKind.RESOURCE_NOT_FOUND, 404),
        (ErrorKind.EMAIL_ALREADY_EXISTS, 409),
        (ErrorKind.OPERATION_TIMEOUT, 503),
        (ErrorKind.MAX_CODE_GENERATION_ATTEMPTS, 500),
        (ErrorKind.STORAGE_FAILURE, 500),
    ],
)
def test_status_for(kind: ErrorKind, status_code: int) -> None:
    assert status_for(kind) == status_code


def test_client_errors_keep_their_message() -> None:
    api_error = to_api_error(domain_error(ErrorKind.INVALID_URL, "Invalid Url: Url cannot be empty"))

    assert api_error.status_code == 400
    assert api_error.kind == ErrorKind.INVALID_URL
    assert api_error.message == "Invalid Url: Url cannot be empty"


def test_server_errors_hide_internal_detail() -> None:
    error = infrastructure_error(
        ErrorKind.STORAGE_FAILURE, "psycopg2.OperationalError: connection refused"
    )

    api_error = to_api_error(error)

    assert api_error.status_code == 500
    assert api_error.message == PUBLIC_MESSAGES[500]
    assert api_error.error is error


def test_timeout_uses_public_message() -> None:
    api_error = to_api_error(application_error(ErrorKind.OPERATION_TIMEOUT, "deadline passed"))

    assert api_error.status_code == 503
    assert api_error.message == PUBLIC_MESSAGES[503]
