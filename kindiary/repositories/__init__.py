"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from kindiary.repositories.base import BaseRepository, apply_sorting, parse_sort_tokens
from kindiary.repositories.diary import DiaryRepository
from kindiary.repositories.kindergarten import KindergartenRepository

__all__ = [
    # Base
    "BaseRepository",
    "apply_sorting",
    "parse_sort_tokens",
    # Domain
    "DiaryRepository",
    "KindergartenRepository",
]
