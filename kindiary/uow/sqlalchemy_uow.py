"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

from flask import current_app
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, SessionTransaction

from kindiary.core.extensions import db
from kindiary.repositories import DiaryRepository, KindergartenRepository
from kindiary.uow.base import UnitOfWork


class SQLAlchemyRepositoryContainer:
    """Provide repository instances that share a SQLAlchemy session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.kindergartens = KindergartenRepository(session=self.session)
        self.diaries = DiaryRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    SQLAlchemy-backed UoW using the Flask-scoped session.

    Commits when the block exits cleanly and rolls back otherwise.
    """

    def __init__(self) -> None:
        super().__init__(session=db.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # The session autobegins on first use.
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Read-only Unit of Work backed by the Flask-scoped SQLAlchemy session.

    This UoW:

    - Owns the transaction only when none is active on entry; otherwise it
      attaches to the outer one (e.g. a test SAVEPOINT fixture).
    - Applies ``SET TRANSACTION READ ONLY`` on PostgreSQL/MySQL when it owns
      the transaction.
    - Blocks ORM flushes of new/dirty/deleted objects while active.
    - Rolls back on exit when it owns the transaction; never commits.

    Parameters
    ----------
    enforce_db_readonly:
        If ``True`` (default), apply ``SET TRANSACTION READ ONLY`` when supported.
    """

    def __init__(self, *, enforce_db_readonly: bool = True) -> None:
        super().__init__(session=db.session)
        self.enforce_db_readonly = enforce_db_readonly
        self._txn: SessionTransaction | None = None

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        self._txn = None if self.session().in_transaction() else self.session.begin()
        event.listen(self.session, "before_flush", self._block_flush)

        if self._txn is not None and self.enforce_db_readonly:
            dialect = self.session.get_bind().dialect.name
            if dialect in ("postgresql", "mysql", "mariadb"):
                try:
                    self.session.execute(text("SET TRANSACTION READ ONLY"))
                except SQLAlchemyError as exc:
                    current_app.logger.warning(
                        "SET TRANSACTION READ ONLY failed (%s). Falling back to guards-only.", exc
                    )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._txn is not None:
                self.rollback()
        finally:
            self._txn = None
            event.remove(self.session, "before_flush", self._block_flush)

    @staticmethod
    def _block_flush(session, flush_context, instances) -> None:
        if session.new or session.dirty or session.deleted:
            raise RuntimeError(
                "Read-only UnitOfWork: ORM flush blocked (new/dirty/deleted objects present)."
            )

    def commit(self) -> None:
        """
        Disallow commit in read-only Unit of Work.

        :raises RuntimeError: always, to prevent accidental writes.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        self.session.rollback()
