from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone

from contact_importer.orchestrator import LIMIT_REACHED, ImportBudgetAllocator, import_text, summarize
from contact_importer.models import ImportReport, SkipEntry


def _deterministic_allocator() -> ImportBudgetAllocator:
    counter = itertools.count(1)
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ticks = itertools.count()
    return ImportBudgetAllocator(
        id_factory=lambda: f"id-{next(counter)}",
        clock=lambda: start + timedelta(seconds=next(ticks)),
    )


def _fields(report: ImportReport):
    return [(record.name, record.email, record.phone) for record in report.accepted]


def test_mixed_input_produces_records_and_diagnostics() -> None:
    text = "\n".join(
        [
            "Name, Email, Phone",
            "Ayesha Khan, ayesha, 9876543210",
            "",
            "Farhan Ali | farhan@gmail | 9999999999",
            "just two",
            "Bad 123, bad@example.com, 5551234",
            "Sara Malik sara@yahoo.com 03001234567",
            "Omar, omar@gmail.com, 12345",
        ]
    )

    report = _deterministic_allocator().run(text, 10)

    assert _fields(report) == [
        ("Ayesha Khan", "ayesha@gmail.com", "9876543210"),
        ("Farhan Ali", "farhan@gmail.com", "9999999999"),
        ("Sara Malik", "sara@yahoo.com", "03001234567"),
    ]
    assert [record.id for record in report.accepted] == ["id-1", "id-2", "id-3"]
    assert report.as_rows()[0]["created_at"] == "2024-01-01T00:00:00+00:00"
    assert report.skipped == (
        SkipEntry(line=6, reason="Name must be letters only"),
        SkipEntry(line=8, reason="Phone length must be 7–15 digits"),
    )


def test_capacity_exhaustion_reports_limit_reached() -> None:
    text = "Ayesha Khan, ayesha@gmail.com, 9876543210\nFarhan Ali, farhan@gmail.com, 9999999999"

    report = import_text(text, 1)

    assert len(report.accepted) == 1
    assert report.accepted[0].name == "Ayesha Khan"
    assert report.skipped == (SkipEntry(line=2, reason=LIMIT_REACHED),)


def test_limit_is_checked_before_parsing_and_validation() -> None:
    text = "\n".join(
        [
            "Ayesha Khan, ayesha@gmail.com, 9876543210",
            "Invalid 1, nope, 1",
            "unparsable",
            "",
            "name email phone",
        ]
    )

    report = import_text(text, 1)

    assert report.skipped == (
        SkipEntry(line=2, reason=LIMIT_REACHED),
        SkipEntry(line=3, reason=LIMIT_REACHED),
    )


def test_zero_budget_accepts_nothing() -> None:
    text = "Ayesha Khan, ayesha@gmail.com, 9876543210\n\nFarhan Ali farhan 9999999999\n"

    report = import_text(text, 0)

    assert report.accepted == ()
    assert [entry.line for entry in report.skipped] == [1, 3]
    assert all(entry.reason == LIMIT_REACHED for entry in report.skipped)


def test_negative_budget_behaves_like_zero() -> None:
    report = import_text("Ayesha Khan, ayesha@gmail.com, 9876543210", -3)

    assert report.accepted == ()
    assert report.skip_messages() == ["Line 1: limit reached"]


def test_failed_lines_do_not_consume_budget() -> None:
    text = "Bad1, x@y.com, 1234567\nAyesha Khan, ayesha@gmail.com, 9876543210"

    report = import_text(text, 1)

    assert len(report.accepted) == 1
    assert report.skipped == (SkipEntry(line=1, reason="Name must be letters only"),)


def test_header_and_blank_lines_are_never_diagnosed() -> None:
    report = import_text("Phone|Email|Name\n   \n\t\nNAME;EMAIL;PHONE", 5)

    assert report.accepted == ()
    assert report.skipped == ()


def test_repeated_runs_are_deterministic_apart_from_ids() -> None:
    text = "Ayesha Khan, ayesha, 9876543210\nBad 1, x, 1\nFarhan Ali farhan@gmail 9999999999"

    first = import_text(text, 5)
    second = import_text(text, 5)

    assert _fields(first) == _fields(second)
    assert first.skipped == second.skipped
    assert {record.id for record in first.accepted}.isdisjoint({record.id for record in second.accepted})


def test_record_timestamps_come_from_clock() -> None:
    report = _deterministic_allocator().run("A B, a@b.co, 1234567\nC D, c@d.co, 7654321", 5)

    assert report.accepted[0].created_at < report.accepted[1].created_at
    assert report.accepted[0].created_at.tzinfo is not None


def test_summarize_messages() -> None:
    assert summarize(import_text("", 5)).text == "Nothing to add."

    nothing = summarize(import_text("Bad 1, x@y.com, 1234567", 5))
    assert not nothing.ok
    assert nothing.text == "Nothing added. Fix lines. Example: Name, email, phone"

    partial = summarize(import_text("Ayesha Khan, ayesha, 9876543210\nBad 1, x@y.com, 1234567", 5))
    assert partial.ok
    assert partial.text == "Added 1 entries. Skipped 1."

    full = summarize(import_text("Ayesha Khan, ayesha, 9876543210", 5))
    assert full.text == "Added 1 entries."


def test_leading_byte_order_mark_does_not_break_first_line() -> None:
    report = import_text("\ufeffAyesha Khan, ayesha, 9876543210\nFarhan Ali farhan 9999999999", 5)

    assert _fields(report) == [
        ("Ayesha Khan", "ayesha@gmail.com", "9876543210"),
        ("Farhan Ali", "farhan@gmail.com", "9999999999"),
    ]
    assert report.skipped == ()
