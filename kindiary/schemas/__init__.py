"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, LogoutResultSchema, RefreshSchema, TokenPairSchema
from .diary import DiaryDateSchema, DiarySchema, DiarySearchSchema, DiaryWriteSchema
from .kindergarten import EmailQuerySchema, KindergartenSchema, KindergartenSignupSchema

__all__ = [
    "LoginSchema",
    "RefreshSchema",
    "TokenPairSchema",
    "LogoutResultSchema",
    "KindergartenSignupSchema",
    "KindergartenSchema",
    "EmailQuerySchema",
    "DiaryWriteSchema",
    "DiarySearchSchema",
    "DiarySchema",
    "DiaryDateSchema",
]
