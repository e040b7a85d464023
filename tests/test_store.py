from __future__ import annotations

import itertools
from datetime import datetime, timezone

import pytest

from contact_importer.store import (
    CapacityError,
    ContactBook,
    ContactValidationError,
    RecordNotFoundError,
)


def _book(capacity: int = 3) -> ContactBook:
    counter = itertools.count(1)
    return ContactBook(
        capacity=capacity,
        id_factory=lambda: f"c{next(counter)}",
        clock=lambda: datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_add_prepends_and_normalises_email() -> None:
    book = _book()
    book.add(" Ayesha Khan ", "ayesha", "9876543210")
    second = book.add("Farhan Ali", "farhan@gmail.co", "9999999999")

    assert [record.name for record in book] == ["Farhan Ali", "Ayesha Khan"]
    assert second.email == "farhan@gmail.com"
    assert book.records[1].name == "Ayesha Khan"
    assert book.remaining_slots == 1


def test_add_rejects_invalid_entries_with_field_errors() -> None:
    book = _book()

    with pytest.raises(ContactValidationError) as excinfo:
        book.add("R2D2", "", "12")

    assert excinfo.value.errors == {
        "name": "Name must contain letters only",
        "email": "Email is required",
        "phone": "Phone length must be 7–15 digits",
    }
    assert len(book) == 0


def test_add_refuses_when_full() -> None:
    book = _book(capacity=1)
    book.add("Ayesha Khan", "ayesha@gmail.com", "9876543210")

    assert book.limit_reached
    with pytest.raises(CapacityError):
        book.add("Farhan Ali", "farhan@gmail.com", "9999999999")


def test_update_keeps_identity_and_sets_updated_at() -> None:
    book = _book()
    original = book.add("Ayesha Khan", "ayesha@gmail.com", "9876543210")

    updated = book.update(original.id, "Ayesha K", "ayesha@yahoo.com", "1234567")

    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert updated.updated_at is not None
    assert book.get(original.id) == updated


def test_update_and_delete_unknown_ids() -> None:
    book = _book()

    with pytest.raises(RecordNotFoundError):
        book.update("missing", "Ayesha Khan", "ayesha@gmail.com", "9876543210")
    with pytest.raises(RecordNotFoundError):
        book.delete("missing")


def test_delete_frees_a_slot() -> None:
    book = _book(capacity=1)
    record = book.add("Ayesha Khan", "ayesha@gmail.com", "9876543210")

    assert book.delete(record.id) == record
    assert book.remaining_slots == 1
    assert book.get(record.id) is None


def test_bulk_import_uses_remaining_slots_and_keeps_paste_order() -> None:
    book = _book(capacity=3)
    book.add("Existing Person", "existing@gmail.com", "1112223")

    report = book.bulk_import(
        "Ayesha Khan, ayesha, 9876543210\nFarhan Ali, farhan, 9999999999\nSara Malik, sara, 5556667"
    )

    assert report.added == 2
    assert report.skip_messages() == ["Line 3: limit reached"]
    assert [record.name for record in book] == ["Ayesha Khan", "Farhan Ali", "Existing Person"]
    assert book.limit_reached


def test_search_matches_prefixes_case_insensitively() -> None:
    book = _book()
    book.add("Ayesha Khan", "ayesha@gmail.com", "9876543210")
    book.add("Farhan Ali", "farhan@gmail.com", "9999999999")

    assert [record.name for record in book.search("AYE")] == ["Ayesha Khan"]
    assert [record.name for record in book.search("999")] == ["Farhan Ali"]
    assert book.search("khan") == []
    assert len(book.search("  ")) == 2


def test_constructor_truncates_to_capacity() -> None:
    source = _book(capacity=3)
    for name in ("Aa Bb", "Cc Dd", "Ee Ff"):
        source.add(name, "x@y.com", "1234567")

    book = ContactBook(source.records, capacity=2)

    assert [record.name for record in book] == ["Ee Ff", "Cc Dd"]
