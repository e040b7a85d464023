"""Bulk import orchestrator that drives the per-line pipeline under a capacity budget."""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..ingestion.lines import iter_qualifying_lines
from ..ingestion.normalize import auto_fix_email
from ..ingestion.parser import PARSE_FAILURE_REASON, parse_line
from ..ingestion.validation import validate_candidate
from ..models import ContactRecord, ImportReport, ImportSummary, SkipEntry

LOGGER = logging.getLogger(__name__)

LIMIT_REACHED = "limit reached"
EXAMPLE_LINE = "Name, email, phone"

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


def new_record_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ImportBudgetAllocator:
    """Runs every qualifying line through parse, normalise and validate, accepting at most ``remaining_slots``."""

    def __init__(
        self,
        *,
        id_factory: IdFactory = new_record_id,
        clock: Clock = utc_now,
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock

    def run(self, text: str, remaining_slots: int) -> ImportReport:
        slots = max(int(remaining_slots), 0)
        accepted: List[ContactRecord] = []
        skipped: List[SkipEntry] = []

        for line in iter_qualifying_lines(text or ""):
            if slots <= 0:
                skipped.append(SkipEntry(line=line.index, reason=LIMIT_REACHED))
                continue

            candidate = parse_line(line.text)
            if candidate is None:
                LOGGER.debug("Dropping line %s: %s", line.index, PARSE_FAILURE_REASON)
                continue

            candidate = candidate.with_email(auto_fix_email(candidate.email))
            reason = validate_candidate(candidate)
            if reason:
                LOGGER.debug("Skipping line %s: %s", line.index, reason)
                skipped.append(SkipEntry(line=line.index, reason=reason))
                continue

            accepted.append(
                ContactRecord(
                    id=self._id_factory(),
                    name=candidate.name.strip(),
                    email=candidate.email,
                    phone=candidate.phone.strip(),
                    created_at=self._clock(),
                )
            )
            slots -= 1

        LOGGER.info("Bulk import accepted %s lines and skipped %s", len(accepted), len(skipped))
        return ImportReport(accepted=tuple(accepted), skipped=tuple(skipped))


def summarize(report: ImportReport) -> ImportSummary:
    """Build the one-line outcome message shown after an import."""

    if report.is_empty:
        if report.skipped:
            return ImportSummary(ok=False, text=f"Nothing added. Fix lines. Example: {EXAMPLE_LINE}")
        return ImportSummary(ok=False, text="Nothing to add.")

    text = f"Added {report.added} entries."
    if report.skipped:
        text += f" Skipped {report.skipped_count}."
    return ImportSummary(ok=True, text=text)


def import_text(
    text: str,
    remaining_slots: int,
    *,
    allocator: Optional[ImportBudgetAllocator] = None,
) -> ImportReport:
    """Convenience wrapper running a default allocator once."""

    return (allocator or ImportBudgetAllocator()).run(text, remaining_slots)
