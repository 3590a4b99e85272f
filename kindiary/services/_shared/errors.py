"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or HTTP
machinery. They are stable contracts between repositories, token
infrastructure and application services.

The translation to HTTP responses (RFC 7807) is handled by
:func:`kindiary.services._shared.base.to_api_error`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    :param exc: The exception raised by SQLAlchemy during flush/commit.
    :param constraint_name: Constraint to match (e.g. ``uq_kindergartens_email``).
    :returns: ``True`` if the error message names the constraint.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return constraint_name.lower() in message


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories, token adapters or services.
    - The error handlers translate them to ``APIError`` at the edge.
    """

    pass


# --------------------------------------------------------------------------- #
# Token classification
# --------------------------------------------------------------------------- #


class TokenErrorKind(Enum):
    """Why an access token was rejected.

    The value doubles as the machine-readable ``code`` returned to clients.
    """

    UNSUPPORTED = "unsupported_token"
    EXPIRED = "expired_token"
    MALFORMED = "malformed_token"

    @property
    def code(self) -> str:
        return self.value


_TOKEN_MESSAGES = {
    TokenErrorKind.UNSUPPORTED: "Unsupported token",
    TokenErrorKind.EXPIRED: "Token has expired",
    TokenErrorKind.MALFORMED: "Malformed token",
}


class TokenError(ServiceError):
    """
    Raised when an access token fails validation.

    :param kind: Classified failure.
    :type kind: TokenErrorKind
    """

    def __init__(self, kind: TokenErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or _TOKEN_MESSAGES[kind])


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "Diary").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "Kindergarten").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:  # pragma: no cover
        return f"Conflict on {self.entity}: {self.detail}"


class AuthorizationError(ServiceError):
    """Raised when the actor may not touch the resource."""

    def __init__(self, message: str = "You can only access your own diaries.") -> None:
        super().__init__(message)


class InvalidCredentialsError(ServiceError):
    """Raised when an email/password pair does not match an account."""

    def __init__(self, message: str = "Invalid email or password.") -> None:
        super().__init__(message)


class RefreshTokenMismatchError(ServiceError):
    """Raised when the presented refresh token is absent from the store or differs."""

    def __init__(self, message: str = "Refresh token is invalid or has expired.") -> None:
        super().__init__(message)


class InvalidPasswordConfirmationError(ServiceError):
    """Raised on signup when ``password`` and ``password_confirmation`` differ."""

    def __init__(self, message: str = "Password confirmation does not match.") -> None:
        super().__init__(message)
