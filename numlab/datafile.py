"""Reading whitespace-separated numeric tables from text files."""

from __future__ import annotations

import os
from typing import Iterator

import numpy as np

__all__ = ["read_table"]


def _tokens(handle) -> Iterator[str]:
    for line in handle:
        yield from line.split()


def read_table(
    path: str | os.PathLike,
    columns: int = 3,
    limit: int | None = None,
) -> tuple[np.ndarray, ...]:
    """Read rows of ``columns`` numbers from a text file.

    Numbers may be separated by any whitespace. Reading stops at the end of
    the file or after ``limit`` rows, whichever comes first. Returns one
    array per column.

    Raises ValueError if a value is not a number or the last row is
    incomplete.
    """
    if columns < 1:
        raise ValueError("columns must be at least 1")
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")

    rows: list[list[float]] = []
    row: list[float] = []
    with open(path, "r", encoding="utf-8") as handle:
        for token in _tokens(handle):
            if limit is not None and len(rows) >= limit:
                break
            try:
                value = float(token)
            except ValueError:
                raise ValueError(
                    f"Failed to read input: {token!r} is not a number"
                ) from None
            row.append(value)
            if len(row) == columns:
                rows.append(row)
                row = []
    if row:
        raise ValueError(
            f"Failed to read input: incomplete row with {len(row)} of {columns} values"
        )

    data = np.array(rows, dtype=float).reshape(len(rows), columns)
    return tuple(data.T.copy())