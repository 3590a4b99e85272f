"""Validators shared by the resource schemas."""

from __future__ import annotations

import re

from marshmallow import validate

# Models strip text columns and refuse empty results; reject those inputs here
# so the client gets a 422 instead of a model ValueError.
NOT_BLANK = validate.Regexp(r".*\S", flags=re.DOTALL, error="Must not be blank.")


def text(*, max_len: int) -> list[validate.Validator]:
    """Length plus non-blank validation for a required free-text field."""
    return [validate.Length(min=1, max=max_len), NOT_BLANK]
