"""Row-by-row comparison of two grids."""

from __future__ import annotations

from dataclasses import dataclass, field

from csvgrid.services.grid_store import GridSource, rows_of


@dataclass(frozen=True)
class RowDifference:
    """A 1-indexed row whose content differs between two grids."""

    row_number: int
    left: list[str] = field(default_factory=list)
    right: list[str] = field(default_factory=list)


def compare_grids(left: GridSource, right: GridSource) -> list[RowDifference]:
    """Return the rows that differ; a row missing on one side compares as empty."""
    left_rows = rows_of(left)
    right_rows = rows_of(right)
    differences: list[RowDifference] = []
    for index in range(max(len(left_rows), len(right_rows))):
        left_row = left_rows[index] if index < len(left_rows) else []
        right_row = right_rows[index] if index < len(right_rows) else []
        if left_row != right_row:
            differences.append(RowDifference(index + 1, left_row, right_row))
    return differences


def grids_equal(left: GridSource, right: GridSource) -> bool:
    return not compare_grids(left, right)


__all__ = ["RowDifference", "compare_grids", "grids_equal"]
