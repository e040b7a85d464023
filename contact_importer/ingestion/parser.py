"""Heuristic extraction of name/email/phone fields from a single line."""
from __future__ import annotations

import re
from typing import List, Optional, Sequence

from ..models import ParsedCandidate

# Priority order matters: the first delimiter present in the line wins.
DELIMITERS: Sequence[str] = (",", "|", "\t", ";")

PARSE_FAILURE_REASON = "insufficient fields"

_WHITESPACE = re.compile(r"\s+")


def detect_delimiter(text: str) -> Optional[str]:
    for delimiter in DELIMITERS:
        if delimiter in text:
            return delimiter
    return None


def parse_line(text: str) -> Optional[ParsedCandidate]:
    """Parse a trimmed line into a candidate, or return ``None`` when it has too few fields.

    Delimited lines map their first three pieces to name, email and phone. Lines
    without a delimiter are split on whitespace: the last token is the phone, the
    one before it the email, and everything in front of those forms the name.
    """

    delimiter = detect_delimiter(text)
    if delimiter is not None:
        parts = _split_delimited(text, delimiter)
        if len(parts) < 3:
            return None
        return ParsedCandidate(name=parts[0], email=parts[1], phone=parts[2])

    tokens = [token for token in _WHITESPACE.split(text) if token]
    if len(tokens) < 3:
        return None
    return ParsedCandidate(name=" ".join(tokens[:-2]), email=tokens[-2], phone=tokens[-1])


def _split_delimited(text: str, delimiter: str) -> List[str]:
    pieces: List[str] = []
    for piece in text.split(delimiter):
        cleaned = piece.strip()
        if cleaned:
            pieces.append(cleaned)
    return pieces


__all__ = ["DELIMITERS", "PARSE_FAILURE_REASON", "detect_delimiter", "parse_line"]
