"""Service errors must map onto stable HTTP statuses and codes."""

from __future__ import annotations

import pytest

from kindiary.services._shared.base import to_api_error
from kindiary.services._shared.errors import (
    AuthorizationError,
    ConflictError,
    InvalidCredentialsError,
    InvalidPasswordConfirmationError,
    NotFoundError,
    RefreshTokenMismatchError,
    ServiceError,
    TokenError,
    TokenErrorKind,
)


@pytest.mark.parametrize(
    ("exc", "status", "code"),
    [
        (NotFoundError("Diary", 1), 404, "not_found"),
        (ConflictError("Kindergarten", "email already in use"), 409, "conflict"),
        (AuthorizationError(), 403, "forbidden"),
        (TokenError(TokenErrorKind.EXPIRED), 401, "expired_token"),
        (TokenError(TokenErrorKind.UNSUPPORTED), 401, "unsupported_token"),
        (TokenError(TokenErrorKind.MALFORMED), 401, "malformed_token"),
        (RefreshTokenMismatchError(), 401, "invalid_refresh_token"),
        (InvalidCredentialsError(), 401, "invalid_credentials"),
        (InvalidPasswordConfirmationError(), 400, "invalid_password_confirmation"),
        (ServiceError("month requires year"), 400, "bad_request"),
    ],
)
def test_to_api_error(exc, status, code):
    api_err = to_api_error(exc)
    assert api_err.status_code == status
    assert api_err.code == code
