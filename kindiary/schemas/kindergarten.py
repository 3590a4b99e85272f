"""Kindergarten account schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from kindiary.schemas.common import NOT_BLANK, text


class KindergartenSignupSchema(Schema):
    """Payload for creating an account."""

    name = fields.String(required=True, validate=text(max_len=100))
    owner_name = fields.String(required=True, validate=text(max_len=50))
    phone = fields.String(
        required=True,
        validate=[
            validate.Regexp(r"^[0-9+\-\s]{7,30}$", error="Invalid phone number."),
            NOT_BLANK,
        ],
    )
    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=8, max=128))
    password_confirmation = fields.String(required=True, validate=validate.Length(max=128))


class EmailQuerySchema(Schema):
    email = fields.Email(required=True, validate=validate.Length(max=254))


class KindergartenSchema(Schema):
    """Public representation of an account."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    owner_name = fields.String(required=True)
    phone = fields.String(required=True)
    email = fields.Email(required=True)
