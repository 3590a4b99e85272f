"""
Transaction boundary contract used by the services.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kindiary.repositories import DiaryRepository, KindergartenRepository


class UnitOfWork(ABC):
    """
    One transaction spanning the account and diary repositories.

    A use-case enters the unit, works through ``kindergartens`` and
    ``diaries`` (both bound to the same session) and leaves it. Whether
    leaving commits is up to the implementation.
    """

    kindergartens: KindergartenRepository
    diaries: DiaryRepository

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...
    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...
    @abstractmethod
    def commit(self) -> None: ...
    @abstractmethod
    def rollback(self) -> None: ...
