"""Unit tests for the Kindergarten model."""

import pytest
from sqlalchemy.exc import IntegrityError

from kindiary.models.kindergarten import Kindergarten
from tests.factories.kindergarten import KindergartenFactory


class TestKindergartenModel:
    def test_password_is_hashed_and_write_only(self, session):
        kg = KindergartenFactory(password="s3cret-pass")

        assert kg.password_hash and kg.password_hash != "s3cret-pass"
        assert kg.verify_password("s3cret-pass")
        assert not kg.verify_password("nope")
        with pytest.raises(AttributeError):
            _ = kg.password

    def test_empty_password_is_rejected(self):
        kg = Kindergarten()
        with pytest.raises(ValueError):
            kg.password = ""

    def test_email_is_normalized(self, session):
        kg = KindergartenFactory(email="  Mixed@Case.COM ")
        assert kg.email == "mixed@case.com"

    @pytest.mark.parametrize("email", ["", "no-at-sign", "user@nodot"])
    def test_invalid_email_is_rejected(self, email):
        with pytest.raises(ValueError):
            Kindergarten(email=email)

    def test_required_text_fields_are_stripped(self):
        kg = Kindergarten(name="  Happy Paws ", owner_name=" Kim ", phone=" 010-1111-2222 ")
        assert (kg.name, kg.owner_name, kg.phone) == ("Happy Paws", "Kim", "010-1111-2222")
        with pytest.raises(ValueError):
            Kindergarten(name="   ")

    def test_email_unique_constraint(self, session):
        KindergartenFactory(email="dup@example.com")
        with pytest.raises(IntegrityError):
            KindergartenFactory(email="dup@example.com")
        session.rollback()
