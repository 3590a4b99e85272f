"""Unit tests for DiaryRepository."""

from datetime import date

import pytest

from kindiary.repositories.diary import DiaryRepository
from tests.factories.diary import DiaryFactory
from tests.factories.kindergarten import KindergartenFactory


class TestDiaryRepository:
    @pytest.fixture()
    def repo(self):
        return DiaryRepository()

    def test_find_by_kindergarten_orders_newest_first(self, repo, session):
        kg = KindergartenFactory()
        a = DiaryFactory(kindergarten=kg, date=date(2024, 1, 1))
        b = DiaryFactory(kindergarten=kg, date=date(2024, 2, 1))
        DiaryFactory(date=date(2024, 3, 1))  # another kindergarten

        assert [d.id for d in repo.find_by_kindergarten(kg.id)] == [b.id, a.id]

    def test_find_between_is_inclusive(self, repo, session):
        kg = KindergartenFactory()
        start = DiaryFactory(kindergarten=kg, date=date(2024, 5, 1))
        end = DiaryFactory(kindergarten=kg, date=date(2024, 5, 31))
        DiaryFactory(kindergarten=kg, date=date(2024, 6, 1))

        found = repo.find_by_kindergarten_between(kg.id, date(2024, 5, 1), date(2024, 5, 31))
        assert [d.id for d in found] == [end.id, start.id]

    def test_find_by_uuid(self, repo, session):
        diary = DiaryFactory()

        assert repo.find_by_uuid(diary.uuid).id == diary.id
        assert repo.find_by_uuid("missing") is None

    def test_uuids_are_unique_per_entry(self, repo, session):
        kg = KindergartenFactory()
        first = DiaryFactory(kindergarten=kg)
        second = DiaryFactory(kindergarten=kg)

        assert first.uuid != second.uuid

    def test_delete(self, repo, session):
        diary = DiaryFactory()
        diary_id = diary.id

        repo.delete(diary)
        assert repo.get(diary_id) is None
