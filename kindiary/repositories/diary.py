"""Diary repository: kindergarten-scoped listings and share-link lookup."""

from __future__ import annotations

from datetime import date
from typing import cast

from sqlalchemy import select

from kindiary.models.diary import Diary
from kindiary.repositories.base import BaseRepository


class DiaryRepository(BaseRepository[Diary]):
    """Persistence-only repository for :class:`Diary`.

    Listings are newest first: ``date`` descending, then ``id`` descending so
    entries written on the same day keep a stable order.
    """

    model = Diary

    def _sortable_fields(self):
        return {"date": Diary.date, "title": Diary.title, "created_at": Diary.created_at}

    def _filterable_fields(self):
        return {"kindergarten_id": Diary.kindergarten_id, "uuid": Diary.uuid}

    def _updatable_fields(self):
        return {"dog_name", "title", "content", "date"}

    def _newest_first(self, stmt):
        return stmt.order_by(Diary.date.desc(), Diary.id.desc())

    def find_by_kindergarten(self, kindergarten_id: int) -> list[Diary]:
        """Return every diary of ``kindergarten_id``, newest first."""
        stmt = self._newest_first(select(Diary).where(Diary.kindergarten_id == kindergarten_id))
        return list(self.session.execute(stmt).scalars().all())

    def find_by_kindergarten_between(
        self, kindergarten_id: int, start: date, end: date
    ) -> list[Diary]:
        """Return diaries dated within ``[start, end]`` (inclusive), newest first.

        :param kindergarten_id: Owner to scope by.
        :param start: First day included.
        :param end: Last day included.
        """
        stmt = select(Diary).where(
            Diary.kindergarten_id == kindergarten_id,
            Diary.date >= start,
            Diary.date <= end,
        )
        return list(self.session.execute(self._newest_first(stmt)).scalars().all())

    def find_by_uuid(self, uuid: str) -> Diary | None:
        stmt = select(Diary).where(Diary.uuid == uuid)
        return cast(Diary | None, self.session.execute(stmt).scalars().first())
