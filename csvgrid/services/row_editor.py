"""Row-level fetch and delete operations on a grid store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from csvgrid.core.utils import parse_row_number

if TYPE_CHECKING:  # pragma: no cover
    from csvgrid.services.grid_store import GridStore

logger = logging.getLogger(__name__)


def _padded(rows: Sequence[list[str]], length: int) -> list[list[str]]:
    result = [list(row) for row in rows]
    while len(result) < length:
        result.append([])
    return result


def blank_out_row(rows: Sequence[list[str]], index: int) -> list[list[str]]:
    """Return a copy of ``rows`` with the row at ``index`` emptied.

    Rows after ``index`` keep their positions, leaving a gap.
    """
    result = _padded(rows, index + 1)
    result[index] = []
    return result


def shift_rows_up(rows: Sequence[list[str]], index: int) -> list[list[str]]:
    """Return a copy of ``rows`` without the row at ``index``.

    Later rows move up one position and a blank row is appended, so the
    length matches the input (padded to ``index + 1``).
    """
    result = _padded(rows, index + 1)
    for position in range(index, len(result) - 1):
        result[position] = result[position + 1]
    result[-1] = []
    return result


class RowEditor:
    """Fetch and delete rows of a :class:`GridStore` by 1-indexed number."""

    def __init__(self, store: "GridStore") -> None:
        self._store = store

    def get_row(self, row_number: object) -> list[str]:
        """Return row ``row_number``, or an empty row past the end of the file."""
        index = parse_row_number(row_number) - 1
        rows = self._store.parse_file()
        if index >= len(rows):
            return []
        return rows[index]

    def delete_row(self, row_number: object) -> list[list[str]]:
        """Blank out a row in place and persist. Returns the rows written."""
        index = parse_row_number(row_number) - 1
        rows = blank_out_row(self._store.parse_file(), index)
        self._store.write_file(rows)
        logger.info("Blanked row %d of '%s'.", index + 1, self._store.filename)
        return rows

    def delete_row_and_shift(self, row_number: object) -> list[list[str]]:
        """Remove a row, move later rows up and persist. Returns the rows written."""
        index = parse_row_number(row_number) - 1
        rows = shift_rows_up(self._store.parse_file(), index)
        self._store.write_file(rows)
        logger.info(
            "Deleted row %d of '%s' and shifted %d row(s) up.",
            index + 1,
            self._store.filename,
            max(0, len(rows) - index - 1),
        )
        return rows


__all__ = ["RowEditor", "blank_out_row", "shift_rows_up"]
