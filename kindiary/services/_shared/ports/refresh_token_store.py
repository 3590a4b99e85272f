from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Protocol


def key_for(identity: int | str) -> str:
    """Cache key holding the refresh token of ``identity``."""
    return f"refresh_token:{identity}"


def ensure_ttl(ttl_ms: int) -> int:
    """Return ``ttl_ms`` as an int, rejecting non-positive values.

    :raises ValueError: When ``ttl_ms <= 0``.
    """
    ttl = int(ttl_ms)
    if ttl <= 0:
        raise ValueError(f"Refresh token TTL must be positive, got {ttl_ms!r} ms.")
    return ttl


class RefreshTokenStore(Protocol):
    """
    Identity → refresh token mapping with TTL-based expiry.

    At most one token is stored per identity; :meth:`set` overwrites (last
    writer wins). Expiry is enforced by the backing cache.
    """

    def set(self, identity: int | str, token: str, ttl_ms: int) -> None:
        """Store ``token`` for ``identity`` for ``ttl_ms`` milliseconds."""

    def get(self, identity: int | str) -> str | None:
        """Return the live token for ``identity`` or ``None``."""

    def delete(self, identity: int | str) -> bool:
        """Remove the mapping. :returns: ``True`` if one existed."""


class InMemoryRefreshTokenStore(RefreshTokenStore):
    """
    Process-local refresh token store.

    .. note::
       Uses a lock to mirror the per-key atomicity of the cache and a
       ``clock`` callable so tests can move time forward.
    """

    def __init__(self, *, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))
        self._entries: dict[str, tuple[str, datetime]] = {}
        self._lock = threading.Lock()

    def set(self, identity: int | str, token: str, ttl_ms: int) -> None:
        expires_at = self._clock() + timedelta(milliseconds=ensure_ttl(ttl_ms))
        with self._lock:
            self._entries[key_for(identity)] = (token, expires_at)

    def get(self, identity: int | str) -> str | None:
        key = key_for(identity)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            token, expires_at = entry
            if expires_at <= self._clock():
                # Lazily evict, as the cache would have done on its own.
                del self._entries[key]
                return None
            return token

    def delete(self, identity: int | str) -> bool:
        # An expired entry counts as absent.
        if self.get(identity) is None:
            return False
        with self._lock:
            return self._entries.pop(key_for(identity), None) is not None
