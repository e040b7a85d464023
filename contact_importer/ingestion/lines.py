"""Splitting pasted text into numbered lines and excluding non-data rows."""
from __future__ import annotations

import re
from typing import Iterator, List

from ..models import RawLine

_HEADER_MARKERS = ("name", "email", "phone")

# A byte-order mark counts as padding, like whitespace.
_EDGE_PADDING = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(text: str) -> str:
    return _EDGE_PADDING.sub("", text)


def split_lines(text: str) -> List[RawLine]:
    """Split ``text`` on newlines, trimming each line and keeping 1-based numbering."""

    if not text:
        return []
    return [RawLine(index=index, text=trim(line)) for index, line in enumerate(text.split("\n"), start=1)]


def is_blank(text: str) -> bool:
    return not trim(text)


def is_header_row(text: str) -> bool:
    """Return ``True`` when the line mentions all of name, email and phone."""

    lowered = text.lower()
    return all(marker in lowered for marker in _HEADER_MARKERS)


def iter_qualifying_lines(text: str) -> Iterator[RawLine]:
    """Yield the lines that should be handed to the field parser."""

    for line in split_lines(text):
        if is_blank(line.text) or is_header_row(line.text):
            continue
        yield line


def count_nonblank_lines(text: str) -> int:
    """Number of non-empty lines, as shown in the paste preview."""

    return sum(1 for line in split_lines(text) if not is_blank(line.text))


__all__ = ["trim", "split_lines", "is_blank", "is_header_row", "iter_qualifying_lines", "count_nonblank_lines"]
