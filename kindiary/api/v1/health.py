"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from redis.exceptions import RedisError  # type: ignore[import-untyped]
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from kindiary.api.deps import json_response, timing
from kindiary.core.extensions import REDIS_EXTENSION_KEY, db

bp = Blueprint("health", __name__)


def _cache_status() -> str:
    client = current_app.extensions.get(REDIS_EXTENSION_KEY)
    if client is None:
        return "disabled"
    try:
        client.ping()
    except RedisError:
        current_app.logger.exception("healthcheck.cache_error")
        return "fail"
    return "ok"


@bp.get("/health")
@timing
def healthcheck():
    """Return application, database and token-cache health information."""

    db_status = "ok"
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:  # pragma: no cover - depends on DB backend
        current_app.logger.exception("healthcheck.db_error")
        db_status = "fail"
    cache_status = _cache_status()
    status = "ok" if db_status == "ok" and cache_status != "fail" else "degraded"
    version = current_app.config.get("APP_VERSION", "dev")
    payload = {"status": status, "db": db_status, "cache": cache_status, "version": version}
    return json_response(payload)
