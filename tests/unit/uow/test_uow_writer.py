"""
Unit tests for SQLAlchemyUnitOfWork (writer), using factories.
"""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from kindiary.models import Kindergarten
from kindiary.uow import SQLAlchemyUnitOfWork
from tests.factories.kindergarten import KindergartenFactory


def _count(session) -> int:
    return session.execute(select(func.count()).select_from(Kindergarten)).scalar_one()


class TestSQLAlchemyUnitOfWorkWriter:
    def test_writer_uow_commits_on_success(self, db, session):
        """
        GIVEN a writer UoW
        WHEN we add an account inside the context and leave without exception
        THEN the transaction is committed and the row is visible afterwards.
        """
        initial = _count(session)

        with SQLAlchemyUnitOfWork() as uow:
            kg = KindergartenFactory.build()  # build = no persist
            kg.password = "Passw0rd!"
            uow.kindergartens.add(kg)

        assert _count(session) == initial + 1

    def test_writer_uow_rolls_back_on_exception(self, db, session):
        """
        GIVEN a writer UoW
        WHEN an exception is raised inside the context
        THEN the transaction is rolled back and no rows are persisted.
        """
        initial = _count(session)

        with pytest.raises(RuntimeError), SQLAlchemyUnitOfWork() as uow:
            kg = KindergartenFactory.build()
            kg.password = "Passw0rd!"
            uow.kindergartens.add(kg)
            raise RuntimeError("boom")

        assert _count(session) == initial
