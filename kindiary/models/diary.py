"""Diary entry written by a kindergarten about one dog on one day."""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING
from uuid import uuid4

from sqlalchemy import Date, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from kindiary.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .kindergarten import Kindergarten


def _new_uuid() -> str:
    return str(uuid4())


class Diary(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    One diary entry.

    Fields
    ------
    uuid : str
        Public identifier used by the share link. Generated on insert.
    kindergarten_id : int
        Owning kindergarten (FK, cascade on delete).
    dog_name : str
        Name of the dog the entry is about.
    title : str
        Short headline (max 50 chars).
    content : str
        Body text (max 1000 chars).
    date : datetime.date
        Day the entry describes.
    """

    __tablename__ = "diaries"
    __repr_fields__ = ("date", "title")

    uuid: Mapped[str] = mapped_column(String(36), nullable=False, default=_new_uuid)
    kindergarten_id: Mapped[int] = mapped_column(
        ForeignKey("kindergartens.id", ondelete="CASCADE"),
        nullable=False,
    )
    dog_name: Mapped[str] = mapped_column(String(30), nullable=False)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    kindergarten: Mapped[Kindergarten] = relationship(back_populates="diaries")

    __table_args__ = (
        UniqueConstraint("uuid", name="uq_diaries_uuid"),
        Index("ix_diaries_kindergarten_id_date", "kindergarten_id", "date"),
    )

    @validates("dog_name", "title", "content")
    def _strip_required(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{key} is required.")
        return value.strip()

    def is_owned_by(self, kindergarten_id: int | None) -> bool:
        """Return ``True`` when ``kindergarten_id`` wrote this entry."""
        return kindergarten_id is not None and self.kindergarten_id == int(kindergarten_id)
