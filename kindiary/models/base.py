"""Column mixins shared by ``Kindergarten`` and ``Diary``."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column


def _utc_timestamp(**kwargs) -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), **kwargs
    )


class PKMixin:
    id: Mapped[int] = mapped_column(Integer, primary_key=True)


class TimestampMixin:
    """Database-managed ``created_at`` / ``updated_at`` (aware UTC).

    ``updated_at`` is bumped by SQLAlchemy on every ORM ``UPDATE``. Diary
    listings break date ties on ``created_at``.
    """

    created_at: Mapped[datetime] = _utc_timestamp()
    updated_at: Mapped[datetime] = _utc_timestamp(onupdate=func.now())


class ReprMixin:
    """``<Diary id=3 title='Walk'>`` style repr.

    Subclasses list extra attributes in ``__repr_fields__``; secrets such as
    password hashes must never be listed.
    """

    __repr_fields__: tuple[str, ...] = ()

    def __repr__(self) -> str:
        parts = [f"id={getattr(self, 'id', None)}"]
        parts += [f"{name}={getattr(self, name, None)!r}" for name in self.__repr_fields__]
        return f"<{type(self).__name__} {' '.join(parts)}>"
