"""Pytest fixtures configuring an isolated transactional database layer.

Each test runs inside a SAVEPOINT-backed transaction against an in-memory
SQLite database so data changes never leak between cases. The token cache is
a fresh :class:`fakeredis.FakeRedis` per test.
"""

from __future__ import annotations

import os

import fakeredis
import pytest
from sqlalchemy.orm import scoped_session, sessionmaker

from kindiary.api.deps import AUTH_SERVICE_KEY
from kindiary.core.config import TestingConfig
from kindiary.core.extensions import REDIS_EXTENSION_KEY
from kindiary.core.extensions import db as _db  # Flask-SQLAlchemy instance
from kindiary.factory import create_app  # application factory under test


class TestConfig(TestingConfig):
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Uses an in-memory SQLite database for speed.
    - Leaves ``REDIS_URL`` unset; the ``fake_redis`` fixture installs a client.
    """

    LOG_LEVEL = "WARNING"


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing."""
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    os.environ.pop("REDIS_URL", None)
    app = create_app(TestConfig, instance_relative_config=False)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture(scope="session")
def db(app):
    """Create database tables once per test session.

    Yields
    ------
    flask_sqlalchemy.SQLAlchemy
        Database extension bound to the testing application.
    """
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(db):
    """Keep a dedicated DBAPI connection open for the whole session."""
    conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def session(db, connection):
    """Provide a SQLAlchemy session wrapped in a nested transaction.

    Yields
    ------
    sqlalchemy.orm.scoping.scoped_session
        Scoped session bound to the shared connection; automatically rolled
        back after each test.

    Notes
    -----
    The fixture opens a top-level transaction plus an outer SAVEPOINT. The
    session joins with ``create_savepoint`` so every ``commit()`` issued by a
    unit of work only releases an inner SAVEPOINT and never reaches the
    database.
    """
    top_trans = connection.begin()
    nested = connection.begin_nested()

    SessionFactory = sessionmaker(
        bind=connection,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    scoped = scoped_session(SessionFactory)

    # Monkey-patch db.session so app code uses this scoped session
    original_session = db.session
    db.session.remove()
    db.session = scoped

    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = original_session
        if nested.is_active:
            nested.rollback()
        top_trans.rollback()


@pytest.fixture
def fake_redis(app):
    """Install a fresh FakeRedis as the app's token cache.

    The cached auth service is dropped as well so it rebinds to this client.
    """
    r = fakeredis.FakeRedis()
    r.flushall()
    app.extensions[REDIS_EXTENSION_KEY] = r
    app.extensions.pop(AUTH_SERVICE_KEY, None)
    try:
        yield r
    finally:
        app.extensions.pop(REDIS_EXTENSION_KEY, None)
        app.extensions.pop(AUTH_SERVICE_KEY, None)


@pytest.fixture
def unreachable_redis():
    """FakeRedis whose every command raises :class:`redis.ConnectionError`."""
    server = fakeredis.FakeServer()
    server.connected = False
    return fakeredis.FakeRedis(server=server)


@pytest.fixture
def client(app, session):
    """Flask test client sharing the transactional session."""
    # Fresh app context per test so ``flask.g`` does not leak from the
    # session-wide context pushed by the ``db`` fixture.
    with app.app_context():
        yield app.test_client()


@pytest.fixture
def login(client, fake_redis):
    """Return a helper logging an account in and yielding its token pair."""

    def _login(email: str, password: str = "Passw0rd!") -> dict:
        resp = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()["data"]

    return _login


@pytest.fixture
def auth_headers(login):
    """Return a helper building ``Authorization`` headers for an account."""

    def _headers(email: str, password: str = "Passw0rd!") -> dict[str, str]:
        return {"Authorization": f"Bearer {login(email, password)['access_token']}"}

    return _headers


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the transactional session fixture."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield
