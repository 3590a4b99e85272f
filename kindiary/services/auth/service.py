from __future__ import annotations

import hmac
import logging
import secrets

import redis  # type: ignore[import-untyped]

from kindiary.repositories.kindergarten import KindergartenRepository
from kindiary.services._shared.base import BaseService
from kindiary.services._shared.errors import (
    InvalidCredentialsError,
    RefreshTokenMismatchError,
    TokenError,
)
from kindiary.services._shared.ports.refresh_token_store import RefreshTokenStore
from kindiary.services._shared.ports.token_provider import TokenProvider
from kindiary.services.auth.dto import (
    AuthResult,
    AuthTokenConfig,
    LoginIn,
    RefreshIn,
    TokenPairOut,
)

log = logging.getLogger(__name__)

REFRESH_TOKEN_BYTES = 48


class AuthService(BaseService):
    """
    Authentication lifecycle service (login / refresh / logout / authorize).

    Access tokens come from a :class:`TokenProvider`; refresh tokens are opaque
    random strings kept in a :class:`RefreshTokenStore`, one per identity.
    The service holds no mutable state, so one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        refresh_store: RefreshTokenStore,
        token_cfg: AuthTokenConfig | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param token_provider: Access-token codec and validator.
        :param refresh_store: Identity → refresh token store.
        :param token_cfg: Validity and rotation settings.
        """
        super().__init__()
        self.tokens = token_provider
        self.refresh_store = refresh_store
        self.cfg = token_cfg or AuthTokenConfig()

    @classmethod
    def build(
        cls,
        *,
        secret_key: str,
        access_validity_ms: int,
        refresh_validity_ms: int,
        redis_client: redis.Redis,
        rotate_refresh_tokens: bool = True,
    ) -> AuthService:
        """Wire the JWT provider and Redis store from plain settings."""
        # Imported here so the service module does not depend on infra at import time.
        from kindiary.infra.jwt.jwt_token_provider import JWTTokenProvider
        from kindiary.infra.redis.redis_refresh_token_store import RedisRefreshTokenStore

        return cls(
            token_provider=JWTTokenProvider(secret_key, access_validity_ms),
            refresh_store=RedisRefreshTokenStore(redis_client),
            token_cfg=AuthTokenConfig(
                access_validity_ms=access_validity_ms,
                refresh_validity_ms=refresh_validity_ms,
                rotate_refresh_tokens=rotate_refresh_tokens,
            ),
        )

    # ------------------------------------------------------------------ #
    # Issuance
    # ------------------------------------------------------------------ #

    @staticmethod
    def new_refresh_token() -> str:
        return secrets.token_urlsafe(REFRESH_TOKEN_BYTES)

    def issue_tokens(self, identity: int) -> TokenPairOut:
        """
        Issue an access token and persist a fresh refresh token for ``identity``.

        Any refresh token previously stored for the identity is replaced.
        """
        refresh = self.new_refresh_token()
        self.refresh_store.set(identity, refresh, self.cfg.refresh_validity_ms)
        access = self.tokens.issue_access_token(identity)
        return TokenPairOut(access_token=access, refresh_token=refresh)

    def login(self, dto: LoginIn) -> TokenPairOut:
        """
        Authenticate credentials and issue a fresh token pair.

        :raises InvalidCredentialsError: If the email is unknown or the password wrong.
        """
        with self.ro_uow() as uow:
            repo: KindergartenRepository = uow.kindergartens
            kindergarten = repo.authenticate(dto.email, dto.password)
            if kindergarten is None:
                raise InvalidCredentialsError()
            identity = kindergarten.id

        log.info("Login succeeded", extra={"identity": identity})
        return self.issue_tokens(identity)

    # ------------------------------------------------------------------ #
    # Refresh
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> TokenPairOut:
        """
        Exchange a refresh token for a new access token.

        The identity is read from the access token even when it has expired;
        the signature must still verify. The refresh token must match the one
        stored for that identity.

        :raises TokenError: If the access token is malformed or unsupported.
        :raises RefreshTokenMismatchError: If no refresh token is stored or it differs.
        """
        identity = self.tokens.extract_identity(dto.access_token)

        stored = self.refresh_store.get(identity)
        if stored is None or not hmac.compare_digest(
            stored.encode("utf-8"), dto.refresh_token.encode("utf-8")
        ):
            log.info("Refresh rejected", extra={"identity": identity})
            raise RefreshTokenMismatchError()

        if self.cfg.rotate_refresh_tokens:
            return self.issue_tokens(identity)

        access = self.tokens.issue_access_token(identity)
        return TokenPairOut(access_token=access, refresh_token=dto.refresh_token)

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    def logout(self, identity: int) -> bool:
        """Drop the stored refresh token. :returns: ``True`` if one was stored."""
        return self.refresh_store.delete(identity)

    # ------------------------------------------------------------------ #
    # Per-request authorization
    # ------------------------------------------------------------------ #

    def authenticate(self, token: str) -> AuthResult:
        """
        Validate an access token and resolve its identity.

        Classified token failures come back as ``AuthResult(error=kind)``;
        anything else propagates.
        """
        try:
            self.tokens.validate(token)
            identity = self.tokens.extract_identity(token)
        except TokenError as exc:
            return AuthResult(error=exc.kind)
        return AuthResult(identity=identity)
