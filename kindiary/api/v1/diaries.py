"""Diary endpoints scoped to the authenticated kindergarten."""

from __future__ import annotations

from flask import Blueprint, request

from kindiary.api.deps import current_identity, json_response, require_auth, timing
from kindiary.schemas import DiaryDateSchema, DiarySchema, DiarySearchSchema, DiaryWriteSchema
from kindiary.services.diaries.dto import DiaryCreateIn, DiarySearchIn, DiaryUpdateIn
from kindiary.services.diaries.service import DiaryService

bp = Blueprint("diaries", __name__)

write_schema = DiaryWriteSchema()
search_schema = DiarySearchSchema()
diary_schema = DiarySchema()
diaries_schema = DiarySchema(many=True)
dates_schema = DiaryDateSchema(many=True)


@bp.get("/date")
@require_auth
@timing
def list_dates():
    """Return ``{id, date}`` for every diary, newest first."""

    rows = DiaryService().list_dates(current_identity())
    return json_response({"data": dates_schema.dump(rows)})


@bp.get("")
@require_auth
@timing
def list_diaries():
    """List diaries, optionally restricted by ``?year=`` and ``?month=``."""

    criteria = search_schema.load(request.args)
    diaries = DiaryService().list_diaries(current_identity(), DiarySearchIn(**criteria))
    return json_response({"data": diaries_schema.dump(diaries)})


@bp.get("/<int:diary_id>")
@require_auth
@timing
def get_diary(diary_id: int):
    diary = DiaryService().get_diary(current_identity(), diary_id)
    return json_response({"data": diary_schema.dump(diary)})


@bp.post("")
@require_auth
@timing
def create_diary():
    data = write_schema.load(request.get_json(silent=True) or {})
    created = DiaryService().create(current_identity(), DiaryCreateIn(**data))
    return json_response({"data": {"id": created.id}}, status=201)


@bp.put("/<int:diary_id>")
@require_auth
@timing
def update_diary(diary_id: int):
    data = write_schema.load(request.get_json(silent=True) or {})
    DiaryService().update(current_identity(), diary_id, DiaryUpdateIn(**data))
    return "", 204


@bp.delete("/<int:diary_id>")
@require_auth
@timing
def delete_diary(diary_id: int):
    DiaryService().delete(current_identity(), diary_id)
    return "", 204


@bp.get("/shared/<string:uuid>")
@timing
def get_shared(uuid: str):
    """Public read access through a diary's share link."""

    diary = DiaryService().get_shared(uuid)
    return json_response({"data": diary_schema.dump(diary)})
