from __future__ import annotations

from datetime import datetime
from typing import Protocol


class TokenProvider(Protocol):
    """Port for issuing and checking access tokens.

    Implementations raise :class:`~kindiary.services._shared.errors.TokenError`
    with a :class:`~kindiary.services._shared.errors.TokenErrorKind` on every
    classified failure; they never leak library exception types.
    """

    def issue_access_token(self, identity: int, *, now: datetime | None = None) -> str: ...

    def extract_identity(self, token: str) -> int:
        """Return the identity claim; expired but correctly signed tokens are accepted."""
        ...

    def validate(self, token: str, *, now: datetime | None = None) -> None:
        """Return ``None`` when the token is usable at ``now``; raise ``TokenError`` otherwise."""
        ...
