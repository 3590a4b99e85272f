from __future__ import annotations

import pytest

from kindiary.models.kindergarten import Kindergarten
from kindiary.services._shared.errors import (
    ConflictError,
    InvalidPasswordConfirmationError,
    NotFoundError,
)
from kindiary.services.kindergartens.dto import KindergartenOut, KindergartenSignupIn
from kindiary.services.kindergartens.service import KindergartenService
from tests.factories.kindergarten import KindergartenFactory


def _signup_dto(**overrides) -> KindergartenSignupIn:
    data = {
        "name": "Happy Paws",
        "owner_name": "Kim Minji",
        "phone": "010-1234-5678",
        "email": "hello@happypaws.test",
        "password": "s3cret-pass",
        "password_confirmation": "s3cret-pass",
    }
    data.update(overrides)
    return KindergartenSignupIn(**data)


@pytest.fixture()
def service() -> KindergartenService:
    return KindergartenService()


def test_signup_creates_account_with_hashed_password(service, session):
    out = service.signup(_signup_dto(email="  Hello@HappyPaws.TEST "))

    assert isinstance(out, KindergartenOut)
    assert out.email == "hello@happypaws.test"

    stored = session.get(Kindergarten, out.id)
    assert stored is not None
    assert stored.password_hash != "s3cret-pass"
    assert stored.verify_password("s3cret-pass")


def test_signup_rejects_mismatched_confirmation(service, session):
    with pytest.raises(InvalidPasswordConfirmationError):
        service.signup(_signup_dto(password_confirmation="something-else"))
    assert service.email_exists("hello@happypaws.test") is False


def test_signup_rejects_taken_email(service):
    KindergartenFactory(email="hello@happypaws.test")

    with pytest.raises(ConflictError):
        service.signup(_signup_dto(email="HELLO@happypaws.test"))


def test_email_exists(service):
    KindergartenFactory(email="taken@example.com")

    assert service.email_exists("taken@example.com") is True
    assert service.email_exists("Taken@Example.com") is True
    assert service.email_exists("free@example.com") is False


def test_get_returns_public_fields(service):
    kg = KindergartenFactory(name="Sunny Tails", phone="02-555-0101")

    out = service.get(kg.id)
    assert out == KindergartenOut(
        id=kg.id, name="Sunny Tails", owner_name=kg.owner_name, phone="02-555-0101", email=kg.email
    )


def test_get_unknown_account_raises(service):
    with pytest.raises(NotFoundError):
        service.get(999_999)
