"""Kindergarten repository: lookups and credential checks."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from kindiary.models.kindergarten import Kindergarten
from kindiary.repositories.base import BaseRepository


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class KindergartenRepository(BaseRepository[Kindergarten]):
    """Persistence-only repository for :class:`Kindergarten`.

    It never touches tokens; the auth service owns those.
    """

    model = Kindergarten

    def _sortable_fields(self):
        return {
            "id": Kindergarten.id,
            "name": Kindergarten.name,
            "created_at": Kindergarten.created_at,
        }

    def _filterable_fields(self):
        return {"email": Kindergarten.email}

    def _updatable_fields(self):
        return {"name", "owner_name", "phone"}

    def get_by_email(self, email: str) -> Kindergarten | None:
        """Fetch an account by email (case-insensitive).

        :param email: Email address to normalise and search.
        :returns: Kindergarten or ``None`` when not found.
        """
        stmt = select(Kindergarten).where(Kindergarten.email == _normalize_email(email))
        return cast(Kindergarten | None, self.session.execute(stmt).scalars().first())

    def exists_by_email(self, email: str) -> bool:
        stmt = select(Kindergarten.id).where(Kindergarten.email == _normalize_email(email))
        return self.session.execute(stmt).first() is not None

    def authenticate(self, email: str, password: str) -> Kindergarten | None:
        """Return the account when ``password`` matches, else ``None``."""
        kindergarten = self.get_by_email(email)
        if kindergarten is None or not kindergarten.verify_password(password):
            return None
        return kindergarten
