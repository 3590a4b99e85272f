from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from kindiary.services._shared.errors import TokenError, TokenErrorKind
from kindiary.services._shared.ports import TokenProvider

log = logging.getLogger(__name__)

IDENTITY_CLAIM = "id"
ALLOWED_ALGORITHMS = ["HS256", "HS384", "HS512"]
MIN_KEY_BYTES = 32


def algorithm_for_key(key: bytes) -> str:
    """Pick the strongest HMAC algorithm the key length supports.

    :raises ValueError: When the key is shorter than 256 bits.
    """
    if len(key) >= 64:
        return "HS512"
    if len(key) >= 48:
        return "HS384"
    if len(key) >= MIN_KEY_BYTES:
        return "HS256"
    raise ValueError(
        f"JWT signing key must be at least {MIN_KEY_BYTES} bytes, got {len(key)}."
    )


class JWTTokenProvider(TokenProvider):
    """
    HMAC-signed access tokens backed by PyJWT.

    Claims are ``id`` (identity), ``iat`` and ``exp``. The timestamps keep
    sub-second precision (RFC 7519 NumericDate may be fractional) so a token
    lives exactly ``access_validity_ms`` from the instant it was issued. The
    expiry check runs here rather than inside PyJWT so ``validate`` can be asked
    about any instant; signature and structure are always verified first, so a
    forged token is never reported as merely expired.

    :param secret_key: Shared HMAC secret (at least 32 bytes once UTF-8 encoded).
    :param access_validity_ms: Access token lifetime in milliseconds.
    :param clock: Returns the current aware UTC datetime; defaults to wall clock.
    """

    def __init__(
        self,
        secret_key: str,
        access_validity_ms: int,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if access_validity_ms <= 0:
            raise ValueError("Access token validity must be positive.")
        self._key = secret_key.encode("utf-8")
        self._algorithm = algorithm_for_key(self._key)
        self._validity = timedelta(milliseconds=access_validity_ms)
        self._clock = clock or (lambda: datetime.now(UTC))

    @property
    def algorithm(self) -> str:
        return self._algorithm

    # ------------------------------------------------------------------ #
    # Issue
    # ------------------------------------------------------------------ #

    def issue_access_token(self, identity: int, *, now: datetime | None = None) -> str:
        issued_at = now or self._clock()
        payload = {
            IDENTITY_CLAIM: identity,
            "iat": issued_at.timestamp(),
            "exp": (issued_at + self._validity).timestamp(),
        }
        return jwt.encode(payload, self._key, algorithm=self._algorithm)

    # ------------------------------------------------------------------ #
    # Parse / validate
    # ------------------------------------------------------------------ #

    def _fail(self, kind: TokenErrorKind) -> TokenError:
        # Never log the token itself: it is a bearer credential.
        log.info("Access token rejected: %s", kind.code, extra={"token_error": kind.code})
        return TokenError(kind)

    def _decode(self, token: str) -> dict[str, Any]:
        """Verify signature and structure only; expiry is left to the caller."""
        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=ALLOWED_ALGORITHMS,
                options={"verify_exp": False, "verify_iat": False, "verify_nbf": False},
            )
        except jwt.InvalidAlgorithmError as exc:
            raise self._fail(TokenErrorKind.UNSUPPORTED) from exc
        except jwt.InvalidTokenError as exc:
            raise self._fail(TokenErrorKind.MALFORMED) from exc

        identity = claims.get(IDENTITY_CLAIM)
        exp = claims.get("exp")
        if not isinstance(identity, int) or isinstance(identity, bool):
            raise self._fail(TokenErrorKind.MALFORMED)
        if not isinstance(exp, int | float) or isinstance(exp, bool):
            raise self._fail(TokenErrorKind.MALFORMED)
        return claims

    def extract_identity(self, token: str) -> int:
        return int(self._decode(token)[IDENTITY_CLAIM])

    def validate(self, token: str, *, now: datetime | None = None) -> None:
        claims = self._decode(token)
        at = (now or self._clock()).timestamp()
        if claims["exp"] <= at:
            raise self._fail(TokenErrorKind.EXPIRED)
