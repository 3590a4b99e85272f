"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

import redis  # type: ignore[import-untyped]
from flask import Flask, current_app
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from redis.exceptions import RedisError  # type: ignore[import-untyped]
from sqlalchemy import MetaData

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)

REDIS_EXTENSION_KEY = "redis_client"


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, migrations and the Redis client.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`kindiary.models` package so SQLAlchemy metadata is ready for
        migrations.

    Raises
    ------
    RuntimeError
        When ``REDIS_URL`` is configured but the server does not answer ``PING``.
    """
    db.init_app(app)

    # Ensure models are imported so Alembic sees metadata
    from kindiary import models as _models  # noqa: F401

    migrate.init_app(app, db)

    redis_url = app.config.get("REDIS_URL")
    if not redis_url:
        app.extensions.pop(REDIS_EXTENSION_KEY, None)
        return

    client = redis.Redis.from_url(redis_url)
    try:
        client.ping()
    except RedisError as exc:
        raise RuntimeError(f"Failed to connect to Redis at {redis_url!r}") from exc
    app.extensions[REDIS_EXTENSION_KEY] = client


def get_redis(app: Flask | None = None) -> redis.Redis:
    """Return the Redis client bound to ``app`` (or the current app).

    :raises RedisError: When no client is configured. Surfacing a cache error
        lets the API answer ``503`` instead of an opaque ``500``.
    """
    target = app or current_app
    client = target.extensions.get(REDIS_EXTENSION_KEY)
    if client is None:
        raise RedisError("Redis client is not configured (REDIS_URL unset).")
    return client
