"""Version 1 routes: health, auth, kindergarten accounts and diaries."""

from __future__ import annotations

from flask import Blueprint

from .auth import bp as auth_bp
from .diaries import bp as diaries_bp
from .health import bp as health_bp
from .kindergartens import bp as kindergartens_bp

API_VERSION = "v1"

# (blueprint, prefix below /api/v1); health sits at the version root
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),
    (auth_bp, "/auth"),
    (kindergartens_bp, "/kindergartens"),
    (diaries_bp, "/diaries"),
]
