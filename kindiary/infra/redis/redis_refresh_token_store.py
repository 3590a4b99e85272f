from __future__ import annotations

from dataclasses import dataclass

import redis  # type: ignore[import-untyped]

from kindiary.services._shared.ports.refresh_token_store import (
    RefreshTokenStore,
    ensure_ttl,
    key_for,
)


@dataclass(slots=True)
class RedisRefreshTokenStore(RefreshTokenStore):
    """
    Redis-backed refresh token store.

    Each operation is a single Redis command (``SET PX``, ``GET``, ``DEL``), so
    per-key atomicity comes from Redis and no client-side locking is needed.
    Concurrent writes for one identity resolve last-writer-wins. Connection
    errors (:class:`redis.exceptions.RedisError`) propagate unchanged.

    :param r: A Redis client (already connected).
    """

    r: redis.Redis

    def set(self, identity: int | str, token: str, ttl_ms: int) -> None:
        self.r.set(key_for(identity), token, px=ensure_ttl(ttl_ms))

    def get(self, identity: int | str) -> str | None:
        raw = self.r.get(key_for(identity))
        if raw is None:
            return None
        return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)

    def delete(self, identity: int | str) -> bool:
        return int(self.r.delete(key_for(identity))) == 1
