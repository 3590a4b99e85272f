"""
EmailCodeService
================

One-time codes proving a kindergarten controls an email address.

The service only issues and checks codes. Getting the code to the user
(mail, SMS) belongs to the caller.
"""

from __future__ import annotations

import hmac
import logging
import secrets

from kindiary.services._shared.ports.email_code_store import EmailCodeStore

log = logging.getLogger(__name__)

CODE_DIGITS = 6
DEFAULT_CODE_TTL_MS = 3 * 60 * 1000


class EmailCodeService:
    def __init__(self, store: EmailCodeStore, *, ttl_ms: int = DEFAULT_CODE_TTL_MS) -> None:
        self.store = store
        self.ttl_ms = ttl_ms

    @staticmethod
    def new_code() -> str:
        return f"{secrets.randbelow(10**CODE_DIGITS):0{CODE_DIGITS}d}"

    def issue(self, email: str) -> str:
        """Store a fresh code for ``email`` (replacing any pending one) and return it."""
        code = self.new_code()
        self.store.save(email, code, self.ttl_ms)
        log.info("Email code issued")
        return code

    def verify(self, email: str, code: str) -> bool:
        """
        Check ``code`` against the pending one for ``email``.

        A matching code is consumed. A wrong guess leaves the pending code in
        place until it expires.
        """
        stored = self.store.get(email)
        if stored is None or not hmac.compare_digest(stored.encode(), code.encode()):
            return False
        self.store.delete(email)
        return True
