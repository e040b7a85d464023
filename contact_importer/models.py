"""Data models shared by the bulk import pipeline, the contact book, and exporters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple


# --- Pipeline Intermediates ---

@dataclass(slots=True)
class RawLine:
    """A trimmed line of pasted text with its 1-based position in the input."""

    index: int
    text: str


@dataclass(slots=True)
class ParsedCandidate:
    """Unvalidated name/email/phone triple extracted from a single line."""

    name: str
    email: str
    phone: str

    def with_email(self, email: str) -> "ParsedCandidate":
        return ParsedCandidate(name=self.name, email=email, phone=self.phone)


# --- Records ---

@dataclass(frozen=True, slots=True)
class ContactRecord:
    """A validated contact entry."""

    id: str
    name: str
    email: str
    phone: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    def as_row(self) -> Dict[str, Any]:
        """Return a flat representation suitable for tabular export."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else "",
        }

    def to_dict(self) -> Dict[str, Any]:
        data = self.as_row()
        if not self.updated_at:
            data.pop("updated_at")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContactRecord":
        updated_at = data.get("updated_at")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            email=str(data["email"]),
            phone=str(data["phone"]),
            created_at=datetime.fromisoformat(str(data["created_at"])),
            updated_at=datetime.fromisoformat(str(updated_at)) if updated_at else None,
        )

    def edited(self, *, name: str, email: str, phone: str, updated_at: datetime) -> "ContactRecord":
        """Return a copy with new field values; identity and creation time are kept."""
        return replace(self, name=name, email=email, phone=phone, updated_at=updated_at)


# --- Import Results ---

@dataclass(frozen=True, slots=True)
class SkipEntry:
    """Diagnostic explaining why a line did not produce a record."""

    line: int
    reason: str

    def message(self) -> str:
        return f"Line {self.line}: {self.reason}"


@dataclass(frozen=True)
class ImportReport:
    """Aggregated outcome of one bulk import run."""

    accepted: Tuple[ContactRecord, ...] = field(default_factory=tuple)
    skipped: Tuple[SkipEntry, ...] = field(default_factory=tuple)

    @property
    def added(self) -> int:
        return len(self.accepted)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def is_empty(self) -> bool:
        """``True`` when nothing was accepted."""
        return not self.accepted

    def skip_messages(self) -> List[str]:
        return [entry.message() for entry in self.skipped]

    def as_rows(self) -> List[Dict[str, Any]]:
        return [record.as_row() for record in self.accepted]


@dataclass(frozen=True, slots=True)
class ImportSummary:
    """Caller-facing outcome text for an import run."""

    ok: bool
    text: str


__all__ = [
    "RawLine",
    "ParsedCandidate",
    "ContactRecord",
    "SkipEntry",
    "ImportReport",
    "ImportSummary",
]
