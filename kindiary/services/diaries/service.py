"""
DiaryService
============

Diary CRUD scoped to the authenticated kindergarten, plus public read access
through the share-link UUID.
"""

from __future__ import annotations

import calendar
from datetime import date

from kindiary.models.diary import Diary
from kindiary.repositories.diary import DiaryRepository
from kindiary.services._shared.base import BaseService
from kindiary.services._shared.errors import NotFoundError, ServiceError
from kindiary.services.diaries.dto import (
    DiaryCreatedOut,
    DiaryCreateIn,
    DiaryDateOut,
    DiaryOut,
    DiarySearchIn,
    DiaryUpdateIn,
)


def search_window(criteria: DiarySearchIn) -> tuple[date, date] | None:
    """Return the inclusive ``(start, end)`` range for ``criteria``.

    ``None`` means no date filter.

    :raises ServiceError: When ``month`` is given without ``year`` or out of range.
    """
    if criteria.year is None:
        if criteria.month is not None:
            raise ServiceError("month requires year")
        return None
    if criteria.month is None:
        return date(criteria.year, 1, 1), date(criteria.year, 12, 31)
    if not 1 <= criteria.month <= 12:
        raise ServiceError("month must be between 1 and 12")
    last_day = calendar.monthrange(criteria.year, criteria.month)[1]
    return date(criteria.year, criteria.month, 1), date(criteria.year, criteria.month, last_day)


class DiaryService(BaseService):
    """Diary use cases. ``actor_id`` is the authenticated kindergarten id."""

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def list_dates(self, actor_id: int) -> list[DiaryDateOut]:
        with self.ro_uow() as uow:
            diaries = uow.diaries.find_by_kindergarten(actor_id)
            return [DiaryDateOut(id=d.id, date=d.date) for d in diaries]

    def list_diaries(self, actor_id: int, criteria: DiarySearchIn | None = None) -> list[DiaryOut]:
        """
        List the actor's diaries, newest first.

        :param actor_id: Owning kindergarten.
        :param criteria: Optional year / year+month window.
        :raises ServiceError: On an invalid window.
        """
        window = search_window(criteria or DiarySearchIn())
        with self.ro_uow() as uow:
            repo: DiaryRepository = uow.diaries
            if window is None:
                diaries = repo.find_by_kindergarten(actor_id)
            else:
                diaries = repo.find_by_kindergarten_between(actor_id, *window)
            return [self._to_out(d) for d in diaries]

    def get_diary(self, actor_id: int, diary_id: int) -> DiaryOut:
        with self.ro_uow() as uow:
            diary = self._owned(uow.diaries, actor_id, diary_id)
            return self._to_out(diary)

    def get_shared(self, uuid: str) -> DiaryOut:
        """
        Fetch a diary through its public share link. No ownership check.

        :raises NotFoundError: If no diary carries ``uuid``.
        """
        with self.ro_uow() as uow:
            diary = uow.diaries.find_by_uuid(uuid)
            if diary is None:
                raise NotFoundError("Diary", uuid)
            return self._to_out(diary)

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create(self, actor_id: int, dto: DiaryCreateIn) -> DiaryCreatedOut:
        with self.rw_uow() as uow:
            diary = Diary(
                kindergarten_id=actor_id,
                dog_name=dto.dog_name,
                title=dto.title,
                content=dto.content,
                date=dto.date,
            )
            uow.diaries.add(diary)
            return DiaryCreatedOut(id=diary.id)

    def update(self, actor_id: int, diary_id: int, dto: DiaryUpdateIn) -> None:
        with self.rw_uow() as uow:
            repo: DiaryRepository = uow.diaries
            diary = self._owned(repo, actor_id, diary_id)
            repo.assign_updates(
                diary,
                {
                    "dog_name": dto.dog_name,
                    "title": dto.title,
                    "content": dto.content,
                    "date": dto.date,
                },
            )

    def delete(self, actor_id: int, diary_id: int) -> None:
        with self.rw_uow() as uow:
            repo: DiaryRepository = uow.diaries
            repo.delete(self._owned(repo, actor_id, diary_id))

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _owned(self, repo: DiaryRepository, actor_id: int, diary_id: int) -> Diary:
        """
        Load a diary and check it belongs to ``actor_id``.

        :raises NotFoundError: If the diary does not exist.
        :raises AuthorizationError: If another kindergarten owns it.
        """
        diary = repo.get(diary_id)
        if diary is None:
            raise NotFoundError("Diary", diary_id)
        self.ensure_owner(actor_id, diary.kindergarten_id)
        return diary

    @staticmethod
    def _to_out(diary: Diary) -> DiaryOut:
        return DiaryOut(
            id=diary.id,
            uuid=diary.uuid,
            dog_name=diary.dog_name,
            title=diary.title,
            content=diary.content,
            date=diary.date,
        )
