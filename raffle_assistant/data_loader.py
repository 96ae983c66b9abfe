"""Load raffle participants from CSV files."""

from pathlib import Path

import pandas as pd

REQUIRED_COLUMNS = ("name",)


def parse_random_count(value: str, row_label: str) -> int:
    """Convert a ``random`` cell to a non-negative integer (blank means 0).

    Raises:
        ValueError: If the cell is not a whole number or is negative.
    """
    value = value.strip()
    if not value:
        return 0
    try:
        count = int(value)
    except ValueError as e:
        raise ValueError(f"Invalid random count '{value}' for {row_label}") from e
    if count < 0:
        raise ValueError(f"Random count cannot be negative for {row_label}")
    return count


def load_participants_from_csv(
    filepath: Path | str,
) -> list[tuple[str, str, int]]:
    """Load participant entries from a CSV file.

    Args:
        filepath: Path to a CSV with a ``name`` column and optional ``fixed``
            (spot expression, e.g. ``"1,3,5-8"``) and ``random`` (count)
            columns. Column names are matched case-insensitively.

    Returns:
        List of (name, fixed_text, random_count) tuples in file order. Fixed
        expressions are returned unparsed so they can be checked against the
        raffle's total spot count.

    Raises:
        ValueError: If the CSV is empty, malformed, lacks a ``name`` column,
            or contains a blank name or an invalid random count.
    """
    if isinstance(filepath, str):
        filepath = Path(filepath)

    try:
        df = pd.read_csv(filepath, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"CSV file is empty: {filepath}") from e
    except pd.errors.ParserError as e:
        raise ValueError(f"Failed to parse CSV: {e}") from e

    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"CSV is missing required column(s): {', '.join(missing)}")

    if df.empty:
        raise ValueError(f"CSV file contains no data rows: {filepath}")

    entries = []
    # Row numbers as a spreadsheet shows them (header is row 1)
    for row_number, row in enumerate(df.itertuples(index=False), start=2):
        record = row._asdict()
        name = record["name"].strip()
        if not name:
            raise ValueError(f"Blank participant name on row {row_number}")

        fixed_text = record.get("fixed", "")
        random_count = parse_random_count(record.get("random", ""), f"'{name}' (row {row_number})")
        entries.append((name, fixed_text, random_count))

    return entries
