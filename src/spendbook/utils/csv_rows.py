"""CSV row normalization and tolerant field lookup.

Bank exports arrive either as a headered matrix (first row holds the column
names) or as a list of already-keyed records. Both are normalized into plain
``dict`` rows before any business logic runs.
"""

import csv
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Optional

# Logical field -> accepted header names, in priority order
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "date": ("date", "txn date"),
    "description": ("description",),
    "debit": ("debit",),
    "credit": ("credit",),
}

SNIFF_DELIMITERS = ",;\t|"


def _is_matrix_row(row: Any) -> bool:
    return isinstance(row, Sequence) and not isinstance(row, (str, bytes))


def _zip_with_header(header: Sequence[Any], row: Sequence[Any]) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for col_index, name in enumerate(header):
        if not name:
            continue
        value = row[col_index] if col_index < len(row) else None
        record[str(name).strip()] = value or ""
    return record


def normalize_csv_data(csv_rows: Sequence[Any]) -> list[dict[str, Any]]:
    """Normalize raw CSV rows into field-keyed records.

    - If the first row is a list, it is the header; later list rows are
      zipped against it. Empty header cells contribute no field.
    - Mapping rows pass through unchanged.
    - Rows that end up with no fields are dropped.

    Args:
        csv_rows: Raw rows, each a list of cells or a mapping

    Returns:
        List of normalized rows, header excluded
    """
    if not csv_rows:
        return []

    header = csv_rows[0]
    normalized = []
    for index, row in enumerate(csv_rows):
        if _is_matrix_row(row):
            if index == 0 or not _is_matrix_row(header):
                continue
            record = _zip_with_header(header, row)
        elif isinstance(row, Mapping):
            record = dict(row)
        else:
            continue

        if len(record) > 0:
            normalized.append(record)
    return normalized


def field_name_variants(field_name: str) -> list[str]:
    """Return the header spellings tried for a field, in priority order.

    exact, Capitalized, UPPER, Title Case With Spaces, lower
    """
    candidates = [
        field_name,
        field_name[:1].upper() + field_name[1:],
        field_name.upper(),
        " ".join(word[:1].upper() + word[1:] for word in field_name.split(" ")),
        field_name.lower(),
    ]
    variants = []
    for candidate in candidates:
        if candidate not in variants:
            variants.append(candidate)
    return variants


def get_csv_field(
    row: Mapping[str, Any], field_name: str, default: Optional[str] = ""
) -> Optional[str]:
    """Look up a field under common header casings.

    Returns the first variant whose value is neither None nor "", as a
    string, or ``default`` when none matches.
    """
    for variant in field_name_variants(field_name):
        value = row.get(variant)
        if value is not None and value != "":
            return str(value)
    return default


def resolve_field(row: Mapping[str, Any], logical_name: str, default: str = "") -> str:
    """Look up a logical field by each of its header aliases."""
    for alias in FIELD_ALIASES.get(logical_name, (logical_name,)):
        value = get_csv_field(row, alias, default=None)
        if value is not None:
            return value
    return default


def read_csv_rows(csv_file_path: str | Path) -> list[list[str]]:
    """Read a CSV file into a headered matrix.

    Header cells are lower-cased and stripped; data rows whose cells are all
    blank are skipped.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    csv_path = Path(csv_file_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

    with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        try:
            dialect = csv.Sniffer().sniff(sample, delimiters=SNIFF_DELIMITERS)
        except csv.Error:
            dialect = csv.excel

        rows: list[list[str]] = []
        for cells in csv.reader(f, dialect):
            if not any(cell.strip() for cell in cells):
                continue
            if not rows:
                rows.append([cell.strip().lower() for cell in cells])
            else:
                rows.append([cell.strip() for cell in cells])
    return rows
