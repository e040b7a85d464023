"""Field validation rules for contact entries."""
from __future__ import annotations

import re
from typing import Dict, Optional

from ..models import ParsedCandidate
from .normalize import auto_fix_email, looks_like_email

NAME_PATTERN = re.compile(r"^[A-Za-z ]+$")
PHONE_PATTERN = re.compile(r"^[0-9]+$")

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15

PHONE_LENGTH_MESSAGE = f"Phone length must be {MIN_PHONE_DIGITS}–{MAX_PHONE_DIGITS} digits"


def is_text_only(value: str) -> bool:
    return bool(NAME_PATTERN.match(value.strip()))


def is_numeric(value: str) -> bool:
    return bool(PHONE_PATTERN.match(value.strip()))


def phone_length_ok(value: str) -> bool:
    return MIN_PHONE_DIGITS <= len(value.strip()) <= MAX_PHONE_DIGITS


def validate_candidate(candidate: ParsedCandidate) -> Optional[str]:
    """Return the first violation for a pasted line, checking name, email, then phone."""

    name = (candidate.name or "").strip()
    email = auto_fix_email(candidate.email)
    phone = (candidate.phone or "").strip()

    if not name:
        return "Name missing"
    if not is_text_only(name):
        return "Name must be letters only"

    if not email:
        return "Email missing"
    if not looks_like_email(email):
        return "Invalid email"

    if not phone:
        return "Phone missing"
    if not is_numeric(phone):
        return "Phone must be numeric"
    if not phone_length_ok(phone):
        return PHONE_LENGTH_MESSAGE

    return None


def validate_form(name: str, email: str, phone: str) -> Dict[str, str]:
    """Validate a single entry, reporting one message for each failing field."""

    errors: Dict[str, str] = {}
    name = (name or "").strip()
    email = auto_fix_email(email)
    phone = (phone or "").strip()

    if not name:
        errors["name"] = "Name is required"
    elif not is_text_only(name):
        errors["name"] = "Name must contain letters only"

    if not email:
        errors["email"] = "Email is required"
    elif not looks_like_email(email):
        errors["email"] = "Enter a valid email"

    if not phone:
        errors["phone"] = "Phone number is required"
    elif not is_numeric(phone):
        errors["phone"] = "Phone must be numeric"
    elif not phone_length_ok(phone):
        errors["phone"] = PHONE_LENGTH_MESSAGE

    return errors


__all__ = [
    "MIN_PHONE_DIGITS",
    "MAX_PHONE_DIGITS",
    "PHONE_LENGTH_MESSAGE",
    "is_numeric",
    "is_text_only",
    "validate_candidate",
    "validate_form",
]
