"""Service layer public API.

Callers can import from :mod:`kindiary.services` without knowing the internal
layout.

Re-exports
----------
- Base primitives: :class:`BaseService`
- :class:`AuthService` and its DTOs
- :class:`KindergartenService` and its DTOs, :class:`EmailCodeService`
- :class:`DiaryService` and its DTOs
"""

from __future__ import annotations

from ._shared.base import BaseService
from .auth.dto import AuthResult, AuthTokenConfig, LoginIn, RefreshIn, TokenPairOut
from .auth.service import AuthService
from .diaries.dto import (
    DiaryCreatedOut,
    DiaryCreateIn,
    DiaryDateOut,
    DiaryOut,
    DiarySearchIn,
    DiaryUpdateIn,
)
from .diaries.service import DiaryService
from .kindergartens.email_codes import EmailCodeService
from .kindergartens.dto import KindergartenOut, KindergartenSignupIn
from .kindergartens.service import KindergartenService

__all__ = [
    # Base
    "BaseService",
    # Auth
    "AuthService",
    "AuthResult",
    "AuthTokenConfig",
    "LoginIn",
    "RefreshIn",
    "TokenPairOut",
    # Kindergartens
    "KindergartenService",
    "KindergartenSignupIn",
    "KindergartenOut",
    "EmailCodeService",
    # Diaries
    "DiaryService",
    "DiaryCreateIn",
    "DiaryUpdateIn",
    "DiarySearchIn",
    "DiaryOut",
    "DiaryDateOut",
    "DiaryCreatedOut",
]
