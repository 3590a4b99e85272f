"""Diary resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates_schema

from kindiary.schemas.common import text


class DiaryWriteSchema(Schema):
    """Payload for creating or replacing a diary entry."""

    dog_name = fields.String(required=True, validate=text(max_len=30))
    title = fields.String(required=True, validate=text(max_len=50))
    content = fields.String(required=True, validate=text(max_len=1000))
    date = fields.Date(required=True)


class DiarySearchSchema(Schema):
    """Query parameters for listing diaries."""

    class Meta:
        unknown = EXCLUDE

    year = fields.Integer(load_default=None, validate=validate.Range(min=1, max=9999))
    month = fields.Integer(load_default=None, validate=validate.Range(min=1, max=12))

    @validates_schema
    def month_needs_year(self, data: dict[str, Any], **_: Any) -> None:
        if data.get("month") is not None and data.get("year") is None:
            raise ValidationError("month requires year.", field_name="month")


class DiarySchema(Schema):
    """Public representation of a diary entry."""

    id = fields.Integer(required=True)
    uuid = fields.String(required=True)
    dog_name = fields.String(required=True)
    title = fields.String(required=True)
    content = fields.String(required=True)
    date = fields.Date(required=True)


class DiaryDateSchema(Schema):
    id = fields.Integer(required=True)
    date = fields.Date(required=True)
