"""Kindergarten account endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from kindiary.api.deps import current_identity, json_response, require_auth, timing
from kindiary.schemas import EmailQuerySchema, KindergartenSchema, KindergartenSignupSchema
from kindiary.services.kindergartens.dto import KindergartenSignupIn
from kindiary.services.kindergartens.service import KindergartenService

bp = Blueprint("kindergartens", __name__)

signup_schema = KindergartenSignupSchema()
email_query_schema = EmailQuerySchema()
kindergarten_schema = KindergartenSchema()


@bp.post("")
@timing
def signup():
    """Create an account and return its public representation."""

    data = signup_schema.load(request.get_json(silent=True) or {})
    account = KindergartenService().signup(KindergartenSignupIn(**data))
    return json_response({"data": kindergarten_schema.dump(account)}, status=201)


@bp.get("/email-exists")
@timing
def email_exists():
    """Tell a signup form whether an email is already taken."""

    data = email_query_schema.load(request.args)
    exists = KindergartenService().email_exists(data["email"])
    return json_response({"data": {"exists": exists}})


@bp.get("/me")
@require_auth
@timing
def me():
    account = KindergartenService().get(current_identity())
    return json_response({"data": kindergarten_schema.dump(account)})
