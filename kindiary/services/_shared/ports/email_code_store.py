from __future__ import annotations

from typing import Protocol


def email_code_key(email: str) -> str:
    """Cache key holding the pending verification code of ``email``."""
    return f"email_code:{email.strip().lower()}"


class EmailCodeStore(Protocol):
    """
    Email → verification code mapping with TTL-based expiry.

    One pending code per address; :meth:`save` overwrites.
    """

    def save(self, email: str, code: str, ttl_ms: int) -> None: ...

    def get(self, email: str) -> str | None: ...

    def delete(self, email: str) -> bool: ...
