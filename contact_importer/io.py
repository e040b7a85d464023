"""JSON persistence for the contact book."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from .models import ContactRecord
from .store import MAX_ENTRIES, ContactBook

LOGGER = logging.getLogger(__name__)


def load_records(path: str | Path) -> List[ContactRecord]:
    """Read stored records; a missing or unreadable file yields an empty list."""

    file_path = Path(path)
    if not file_path.exists():
        return []
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        LOGGER.warning("Ignoring unreadable contact store %s", file_path)
        return []
    if not isinstance(payload, list):
        LOGGER.warning("Ignoring contact store %s: expected a list of records", file_path)
        return []

    records: List[ContactRecord] = []
    for item in payload:
        try:
            records.append(ContactRecord.from_dict(item))
        except (KeyError, TypeError, ValueError):
            LOGGER.warning("Skipping malformed stored record: %r", item)
    return records


def load_book(path: str | Path, *, capacity: int = MAX_ENTRIES) -> ContactBook:
    return ContactBook(load_records(path), capacity=capacity)


def save_book(path: str | Path, book: ContactBook) -> Path:
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [record.to_dict() for record in book]
    file_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return file_path
