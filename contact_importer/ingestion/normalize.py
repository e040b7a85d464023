"""Email auto-correction applied before validation."""
from __future__ import annotations

import re

DEFAULT_EMAIL_DOMAIN = "gmail.com"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_GMAIL_TYPOS = {"gmail", "gmail.", "gmail.co"}


def looks_like_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def _split_address(value: str) -> tuple[str, str]:
    # Only the segment between the first and second "@" counts as the domain.
    user, domain = value.split("@")[:2]
    return user, domain


def auto_fix_email(raw: str | None) -> str:
    """Complete obviously truncated addresses with the default domain.

    ``"ayesha"`` becomes ``"ayesha@gmail.com"`` and ``"farhan@gmail"`` or
    ``"x@gmail.co"`` become ``"...@gmail.com"``. Anything else already shaped
    like an address, and any other domain, is returned as typed (trimmed).
    """

    value = (raw or "").strip()

    # "gmail.co" is well-formed, so the typo check has to run before the shape check.
    if "@" in value:
        user, domain = _split_address(value)
        if domain.strip().lower() in _GMAIL_TYPOS:
            return f"{user}@{DEFAULT_EMAIL_DOMAIN}"

    if looks_like_email(value):
        return value

    if "@" not in value:
        return f"{value}@{DEFAULT_EMAIL_DOMAIN}" if value else value

    user, domain = _split_address(value)
    if not domain.strip():
        return f"{user}@{DEFAULT_EMAIL_DOMAIN}"

    return value


__all__ = ["DEFAULT_EMAIL_DOMAIN", "EMAIL_PATTERN", "auto_fix_email", "looks_like_email"]
