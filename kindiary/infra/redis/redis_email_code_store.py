from __future__ import annotations

from dataclasses import dataclass

import redis  # type: ignore[import-untyped]

from kindiary.services._shared.ports.email_code_store import EmailCodeStore, email_code_key
from kindiary.services._shared.ports.refresh_token_store import ensure_ttl


@dataclass(slots=True)
class RedisEmailCodeStore(EmailCodeStore):
    """Pending email verification codes kept under ``email_code:{email}`` with ``PX``."""

    r: redis.Redis

    def save(self, email: str, code: str, ttl_ms: int) -> None:
        self.r.set(email_code_key(email), code, px=ensure_ttl(ttl_ms))

    def get(self, email: str) -> str | None:
        raw = self.r.get(email_code_key(email))
        if raw is None:
            return None
        return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)

    def delete(self, email: str) -> bool:
        return int(self.r.delete(email_code_key(email))) == 1
