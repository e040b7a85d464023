"""Capacity-bounded contact collection owned by the calling application."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .ingestion.normalize import auto_fix_email
from .ingestion.validation import validate_form
from .models import ContactRecord, ImportReport
from .orchestrator.service import Clock, IdFactory, ImportBudgetAllocator, new_record_id, utc_now

LOGGER = logging.getLogger(__name__)

MAX_ENTRIES = 100


class ContactBookError(RuntimeError):
    """Base class for contact book failures."""


class CapacityError(ContactBookError):
    """Raised when adding to a book that is already full."""


class RecordNotFoundError(ContactBookError):
    """Raised when an id does not match any stored record."""


class ContactValidationError(ContactBookError):
    """Raised when a single entry fails validation."""

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = dict(errors)


class ContactBook:
    """Ordered record list, newest first, never holding more than ``capacity`` entries."""

    def __init__(
        self,
        records: Iterable[ContactRecord] = (),
        *,
        capacity: int = MAX_ENTRIES,
        id_factory: IdFactory = new_record_id,
        clock: Clock = utc_now,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._records: List[ContactRecord] = list(records)[:capacity]
        self._id_factory = id_factory
        self._clock = clock

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def records(self) -> List[ContactRecord]:
        return list(self._records)

    @property
    def remaining_slots(self) -> int:
        return self._capacity - len(self._records)

    @property
    def limit_reached(self) -> bool:
        return len(self._records) >= self._capacity

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ContactRecord]:
        return iter(list(self._records))

    def get(self, record_id: str) -> Optional[ContactRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def add(self, name: str, email: str, phone: str) -> ContactRecord:
        if self.limit_reached:
            raise CapacityError(f"Maximum {self._capacity} entries reached")
        errors = validate_form(name, email, phone)
        if errors:
            raise ContactValidationError(errors)

        record = ContactRecord(
            id=self._id_factory(),
            name=name.strip(),
            email=auto_fix_email(email),
            phone=phone.strip(),
            created_at=self._clock(),
        )
        self._records.insert(0, record)
        LOGGER.debug("Added contact %s", record.id)
        return record

    def update(self, record_id: str, name: str, email: str, phone: str) -> ContactRecord:
        index = self._index_of(record_id)
        errors = validate_form(name, email, phone)
        if errors:
            raise ContactValidationError(errors)

        updated = self._records[index].edited(
            name=name.strip(),
            email=auto_fix_email(email),
            phone=phone.strip(),
            updated_at=self._clock(),
        )
        self._records[index] = updated
        return updated

    def delete(self, record_id: str) -> ContactRecord:
        index = self._index_of(record_id)
        return self._records.pop(index)

    def bulk_import(self, text: str, allocator: Optional[ImportBudgetAllocator] = None) -> ImportReport:
        """Run a bulk import against the current headroom and merge accepted records in front."""

        allocator = allocator or ImportBudgetAllocator(id_factory=self._id_factory, clock=self._clock)
        report = allocator.run(text, self.remaining_slots)
        if report.accepted:
            self._records = (list(report.accepted) + self._records)[: self._capacity]
        return report

    def search(self, query: str) -> List[ContactRecord]:
        """Case-insensitive prefix match against name, email or phone."""

        needle = (query or "").strip().lower()
        if not needle:
            return list(self._records)
        return [
            record
            for record in self._records
            if record.name.lower().startswith(needle)
            or record.email.lower().startswith(needle)
            or record.phone.lower().startswith(needle)
        ]

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        raise RecordNotFoundError(f"No contact with id '{record_id}'")


__all__ = [
    "MAX_ENTRIES",
    "CapacityError",
    "ContactBook",
    "ContactBookError",
    "ContactValidationError",
    "RecordNotFoundError",
]
