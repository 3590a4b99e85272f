from __future__ import annotations

from dataclasses import dataclass

from kindiary.services._shared.errors import TokenErrorKind

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: Kindergarten account email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for token refresh.

    :param access_token: Last access token issued to the client; may be expired.
    :type access_token: str
    :param refresh_token: Opaque refresh token from the same pair.
    :type refresh_token: str
    """

    access_token: str
    refresh_token: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenPairOut:
    """
    Output DTO with access and refresh tokens.

    :param access_token: Encoded access JWT.
    :param refresh_token: Opaque refresh token.
    :param token_type: Always ``"bearer"``.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


@dataclass(frozen=True, slots=True)
class AuthResult:
    """
    Outcome of authorizing one request.

    Exactly one of ``identity`` and ``error`` is set.
    """

    identity: int | None = None
    error: TokenErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.identity is not None


# ------------------------------ Config DTO -------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_validity_ms: Access token lifetime in milliseconds.
    :param refresh_validity_ms: Refresh token TTL in milliseconds.
    :param rotate_refresh_tokens: Issue a new refresh token on every refresh.
    """

    access_validity_ms: int = 30 * 60 * 1000
    refresh_validity_ms: int = 14 * 24 * 60 * 60 * 1000
    rotate_refresh_tokens: bool = True
