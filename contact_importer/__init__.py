"""Bulk import of pasted contact text into a bounded, validated contact book."""

from . import models  # noqa: F401
from .models import (
    ContactRecord,
    ImportReport,
    ImportSummary,
    ParsedCandidate,
    RawLine,
    SkipEntry,
)
from .orchestrator import ImportBudgetAllocator, import_text, summarize
from .store import ContactBook

__all__ = [
    "ContactBook",
    "ContactRecord",
    "ImportBudgetAllocator",
    "ImportReport",
    "ImportSummary",
    "ParsedCandidate",
    "RawLine",
    "SkipEntry",
    "import_text",
    "summarize",
    "ingestion",
    "orchestrator",
]
