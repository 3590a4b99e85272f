"""
DTOs for DiaryService.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class DiaryCreateIn:
    """
    Input payload for a new diary entry.

    :param dog_name: Dog the entry is about (max 30 chars).
    :param title: Headline (max 50 chars).
    :param content: Body text (max 1000 chars).
    :param date: Day the entry describes.
    """

    dog_name: str
    title: str
    content: str
    date: date


@dataclass(frozen=True, slots=True)
class DiaryUpdateIn:
    """Full replacement of the editable fields of an entry."""

    dog_name: str
    title: str
    content: str
    date: date


@dataclass(frozen=True, slots=True)
class DiarySearchIn:
    """
    Listing filter.

    :param year: Restrict to one calendar year.
    :param month: Restrict to one month of ``year`` (requires ``year``).
    """

    year: int | None = None
    month: int | None = None


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class DiaryOut:
    id: int
    uuid: str
    dog_name: str
    title: str
    content: str
    date: date


@dataclass(frozen=True, slots=True)
class DiaryDateOut:
    """Lightweight row for calendar views."""

    id: int
    date: date


@dataclass(frozen=True, slots=True)
class DiaryCreatedOut:
    id: int
