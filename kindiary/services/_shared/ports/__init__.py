"""
kindiary.services._shared.ports
===============================

*Ports* (hexagonal interfaces) for token management.

- :mod:`token_provider`: :class:`~.TokenProvider`, access-token codec and validator.
- :mod:`refresh_token_store`: :class:`~.RefreshTokenStore`, identity → refresh
  token mapping with a TTL, plus :class:`~.InMemoryRefreshTokenStore`.
- :mod:`email_code_store`: :class:`~.EmailCodeStore`, pending email
  verification codes with a TTL.

Concrete adapters live under ``kindiary.infra``.
"""

from __future__ import annotations

from .email_code_store import EmailCodeStore
from .refresh_token_store import InMemoryRefreshTokenStore, RefreshTokenStore
from .token_provider import TokenProvider

__all__ = [
    "TokenProvider",
    "RefreshTokenStore",
    "InMemoryRefreshTokenStore",
    "EmailCodeStore",
]
