"""kindiary: kindergarten dog diaries behind a JWT-authenticated Flask API.

``gunicorn 'kindiary:create_app()'`` serves the app built by
:func:`kindiary.factory.create_app`.
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
