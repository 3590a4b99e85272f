"""Authentication endpoints: login, token refresh and logout."""

from __future__ import annotations

from flask import Blueprint, request

from kindiary.api.deps import (
    current_identity,
    get_auth_service,
    json_response,
    require_auth,
    timing,
)
from kindiary.schemas import LoginSchema, LogoutResultSchema, RefreshSchema, TokenPairSchema
from kindiary.services.auth.dto import LoginIn, RefreshIn

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
refresh_schema = RefreshSchema()
token_schema = TokenPairSchema()
logout_schema = LogoutResultSchema()


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue an access/refresh token pair."""

    data = login_schema.load(request.get_json(silent=True) or {})
    pair = get_auth_service().login(LoginIn(email=data["email"], password=data["password"]))
    return json_response({"data": token_schema.dump(pair)})


@bp.post("/refresh")
@timing
def refresh():
    """Exchange a refresh token (plus the last access token) for a new pair."""

    data = refresh_schema.load(request.get_json(silent=True) or {})
    pair = get_auth_service().refresh(
        RefreshIn(access_token=data["access_token"], refresh_token=data["refresh_token"])
    )
    return json_response({"data": token_schema.dump(pair)})


@bp.post("/logout")
@require_auth
@timing
def logout():
    """Forget the caller's refresh token."""

    logged_out = get_auth_service().logout(current_identity())
    return json_response({"data": logout_schema.dump({"logged_out": logged_out})})
