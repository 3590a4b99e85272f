"""Factory Boy base wiring for kindergarten and diary factories.

The autouse ``_factories_session`` fixture registers the per-test SAVEPOINT
session here before any factory runs.
"""

from __future__ import annotations

import factory


class SQLAlchemySession:
    _session = None

    @classmethod
    def set(cls, session) -> None:
        cls._session = session

    @classmethod
    def get(cls):
        """Return the session of the running test.

        :raises RuntimeError: When a factory is used outside a test that pulls
            in the ``session`` fixture.
        """
        if cls._session is None:
            raise RuntimeError("No factory session registered; request the 'session' fixture.")
        return cls._session


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    class Meta:
        abstract = True
        # Resolved on every create, so each test sees its own scoped session.
        sqlalchemy_session_factory = SQLAlchemySession.get
        # Flush only: tests decide when (and whether) to commit.
        sqlalchemy_session_persistence = "flush"
