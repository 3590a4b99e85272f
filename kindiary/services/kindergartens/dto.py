"""
DTOs for KindergartenService.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class KindergartenSignupIn:
    """
    Input payload for account signup.

    :param name: Kindergarten display name.
    :param owner_name: Person running the kindergarten.
    :param phone: Contact phone number.
    :param email: Login email (normalized by the model).
    :param password: Raw password (the model setter hashes it).
    :param password_confirmation: Must equal ``password``.
    """

    name: str
    owner_name: str
    phone: str
    email: str
    password: str
    password_confirmation: str


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class KindergartenOut:
    """Public-safe account payload (never includes the password hash)."""

    id: int
    name: str
    owner_name: str
    phone: str
    email: str
