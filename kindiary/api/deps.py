"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, g, jsonify, request

from kindiary.core.errors import Unauthorized
from kindiary.core.extensions import get_redis
from kindiary.services.auth.service import AuthService

F = TypeVar("F", bound=Callable[..., Any])

AUTH_SERVICE_KEY = "auth_service"
BEARER_PREFIX = "bearer "


def get_auth_service() -> AuthService:
    """Return the app-wide :class:`AuthService`, building it on first use.

    The service is stateless, so one instance per app is shared by all threads.

    :raises redis.exceptions.RedisError: When no Redis client is configured.
    """
    service = current_app.extensions.get(AUTH_SERVICE_KEY)
    if service is None:
        cfg = current_app.config
        service = AuthService.build(
            secret_key=cfg["JWT_SECRET_KEY"],
            access_validity_ms=int(cfg["JWT_ACCESS_TOKEN_EXPIRE_MS"]),
            refresh_validity_ms=int(cfg["JWT_REFRESH_TOKEN_EXPIRE_MS"]),
            redis_client=get_redis(),
            rotate_refresh_tokens=bool(cfg.get("JWT_ROTATE_REFRESH_TOKENS", True)),
        )
        current_app.extensions[AUTH_SERVICE_KEY] = service
    return cast(AuthService, service)


def bearer_token() -> str | None:
    """Extract the token from ``Authorization: Bearer <token>``, if any."""
    header = request.headers.get("Authorization", "")
    if not header.lower().startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX) :].strip()
    return token or None


def require_auth(func: F) -> F:
    """Ensure the request carries a valid access token.

    On success the identity is stored in ``g.identity``; failures map to 401
    with a code naming the cause.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        token = bearer_token()
        if token is None:
            raise Unauthorized("Missing bearer token", code="missing_token")
        result = get_auth_service().authenticate(token)
        if not result.ok:
            kind = result.error
            code = kind.code if kind is not None else "unauthorized"
            raise Unauthorized("Invalid access token", code=code)
        g.identity = result.identity
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_identity() -> int:
    """Return the identity resolved by :func:`require_auth`."""
    identity = getattr(g, "identity", None)
    if identity is None:
        raise Unauthorized("Authentication required", code="missing_token")
    return int(identity)


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
