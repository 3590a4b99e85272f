"""HTTP surface of kindiary, mounted per API version."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def _join_prefix(base: str, rel: str) -> str:
    parts = [p for p in (base.strip("/"), rel.strip("/")) if p]
    return "/" + "/".join(parts)


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Mount each ``(blueprint, relative_prefix)`` under ``base_prefix``.

    An empty relative prefix mounts the blueprint at the version root
    (``/api/v1/health`` lives there).
    """
    for blueprint, rel_prefix in entries:
        app.register_blueprint(blueprint, url_prefix=_join_prefix(base_prefix, rel_prefix))


def init_app(app: Flask) -> None:
    from kindiary.api.v1 import API_VERSION, REGISTRY

    root = app.config.get("API_BASE_PREFIX", "/api")
    register_blueprint_group(app, base_prefix=f"{root}/{API_VERSION}", entries=REGISTRY)


__all__ = ["init_app", "register_blueprint_group"]
