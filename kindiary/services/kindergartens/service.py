"""
KindergartenService
===================

Account signup and lookups for kindergartens.
"""

from __future__ import annotations

import hmac

from sqlalchemy.exc import IntegrityError

from kindiary.models.kindergarten import Kindergarten
from kindiary.repositories.kindergarten import KindergartenRepository
from kindiary.services._shared.base import BaseService
from kindiary.services._shared.errors import (
    ConflictError,
    InvalidPasswordConfirmationError,
    NotFoundError,
    violates,
)
from kindiary.services.kindergartens.dto import KindergartenOut, KindergartenSignupIn

EMAIL_CONSTRAINT = "uq_kindergartens_email"


class KindergartenService(BaseService):
    """Orchestrates account creation and read access to accounts."""

    def signup(self, dto: KindergartenSignupIn) -> KindergartenOut:
        """
        Create a kindergarten account.

        :raises InvalidPasswordConfirmationError: When the confirmation differs.
        :raises ConflictError: When the email is already registered.
        """
        if not hmac.compare_digest(
            dto.password.encode("utf-8"), dto.password_confirmation.encode("utf-8")
        ):
            raise InvalidPasswordConfirmationError()

        try:
            with self.rw_uow() as uow:
                repo: KindergartenRepository = uow.kindergartens
                if repo.exists_by_email(dto.email):
                    raise ConflictError("Kindergarten", "email already in use")

                kindergarten = Kindergarten(
                    name=dto.name,
                    owner_name=dto.owner_name,
                    phone=dto.phone,
                    email=dto.email,
                    password=dto.password,  # model setter hashes
                )
                repo.add(kindergarten)
                return self._to_out(kindergarten)
        except IntegrityError as exc:
            # Lost a race with a concurrent signup for the same email.
            if violates(exc, EMAIL_CONSTRAINT) or "unique" in str(exc.orig).lower():
                raise ConflictError("Kindergarten", "email already in use") from exc
            raise

    def email_exists(self, email: str) -> bool:
        with self.ro_uow() as uow:
            return uow.kindergartens.exists_by_email(email)

    def get(self, kindergarten_id: int) -> KindergartenOut:
        """
        Fetch one account.

        :raises NotFoundError: If it does not exist.
        """
        with self.ro_uow() as uow:
            kindergarten = uow.kindergartens.get(kindergarten_id)
            if kindergarten is None:
                raise NotFoundError("Kindergarten", kindergarten_id)
            return self._to_out(kindergarten)

    # ------------------------------------------------------------------ #
    # Mapping
    # ------------------------------------------------------------------ #

    @staticmethod
    def _to_out(kindergarten: Kindergarten) -> KindergartenOut:
        return KindergartenOut(
            id=kindergarten.id,
            name=kindergarten.name,
            owner_name=kindergarten.owner_name,
            phone=kindergarten.phone,
            email=kindergarten.email,
        )
