"""Export utilities for imported contact records and skip diagnostics."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, MutableMapping, Optional, Union

import pandas as pd

from ..models import ContactRecord, ImportReport

PathLike = Union[str, Path]

RECORD_COLUMNS = ["id", "name", "email", "phone", "created_at", "updated_at"]
SKIPPED_COLUMNS = ["line", "reason"]


def export_records(
    records: Iterable[ContactRecord],
    path: PathLike,
    *,
    sheet_name: str = "Contacts",
    exporter_kwargs: Optional[MutableMapping[str, object]] = None,
) -> Path:
    """Write contact records to a CSV, TSV or Excel file."""

    output_path = Path(path)
    _write_dataframe(records_to_dataframe(records), output_path, sheet_name=sheet_name, exporter_kwargs=exporter_kwargs)
    return output_path


def export_skipped(
    report: ImportReport,
    path: PathLike,
    *,
    sheet_name: str = "Skipped",
    exporter_kwargs: Optional[MutableMapping[str, object]] = None,
) -> Path:
    """Write the per-line skip diagnostics of an import run."""

    output_path = Path(path)
    _write_dataframe(skipped_to_dataframe(report), output_path, sheet_name=sheet_name, exporter_kwargs=exporter_kwargs)
    return output_path


def records_to_dataframe(records: Iterable[ContactRecord]) -> pd.DataFrame:
    """Convert contact records into a :class:`pandas.DataFrame`."""

    return pd.DataFrame([record.as_row() for record in records], columns=RECORD_COLUMNS)


def skipped_to_dataframe(report: ImportReport) -> pd.DataFrame:
    rows = [{"line": entry.line, "reason": entry.reason} for entry in report.skipped]
    return pd.DataFrame(rows, columns=SKIPPED_COLUMNS)


def _write_dataframe(
    dataframe: pd.DataFrame,
    path: Path,
    *,
    sheet_name: str,
    exporter_kwargs: Optional[MutableMapping[str, object]],
) -> None:
    exporter_kwargs = dict(exporter_kwargs or {})
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix in {".csv", ".tsv"}:
        if suffix == ".tsv":
            exporter_kwargs.setdefault("sep", "\t")
        dataframe.to_csv(path, index=False, **exporter_kwargs)
        return

    if suffix in {".xls", ".xlsx", ".xlsm", ".xlsb"}:
        engine = exporter_kwargs.pop("engine", None) or "openpyxl"
        dataframe.to_excel(path, index=False, sheet_name=sheet_name, engine=engine, **exporter_kwargs)
        return

    raise ValueError(f"Unsupported export file extension: {suffix}")


__all__ = ["export_records", "export_skipped", "records_to_dataframe", "skipped_to_dataframe"]
