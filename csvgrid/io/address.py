"""Spreadsheet-style cell addressing ("B3") for csvgrid.

Column letters use bijective base-26: every letter is a digit from 1 (``A``)
to 26 (``Z``) and there is no zero digit, so ``Z`` is followed by ``AA``
rather than ``BA``. The numeric value is shifted down by one to obtain a
zero-based column index.
"""

from __future__ import annotations

import re

from csvgrid.core.errors import InvalidReference

_REFERENCE_PATTERN = re.compile(r"([A-Za-z]+)([1-9][0-9]*)")
_ALPHABET_SIZE = 26
# Column values are kept inside an unsigned 32-bit accumulator.
MAX_COLUMN_VALUE = 0xFFFFFFFF


def split_reference(reference: str) -> tuple[str, int]:
    """Split ``reference`` into upper-cased column letters and a row number.

    The whole string must be letters immediately followed by digits, with a
    row number of at least 1 and no leading zero.

    Example:
        >>> split_reference("ab12")
        ('AB', 12)
    """
    if not isinstance(reference, str):
        raise InvalidReference(reference, "expected a string")
    match = _REFERENCE_PATTERN.fullmatch(reference)
    if match is None:
        raise InvalidReference(reference, "expected column letters followed by a row number")
    letters, digits = match.groups()
    return letters.upper(), int(digits)


def column_letters_to_index(letters: str) -> int:
    """Return the zero-based column index for ``letters`` (``A`` -> 0)."""
    if not letters:
        raise InvalidReference(letters, "empty column letters")
    value = 0
    for char in letters.upper():
        digit = ord(char) - ord("A") + 1
        if digit < 1 or digit > _ALPHABET_SIZE:
            raise InvalidReference(letters, f"unexpected column letter {char!r}")
        value = value * _ALPHABET_SIZE + digit
        if value > MAX_COLUMN_VALUE:
            raise InvalidReference(letters, "column out of range")
    return value - 1


def reference_to_indices(letters: str, number: int) -> tuple[int, int]:
    """Translate split reference parts into ``(row_index, col_index)``."""
    if number < 1:
        raise InvalidReference(f"{letters}{number}", "row number must be positive")
    return number - 1, column_letters_to_index(letters)


def parse_reference(reference: str) -> tuple[int, int]:
    """Return zero-based ``(row_index, col_index)`` for a reference like ``"B3"``."""
    letters, number = split_reference(reference)
    return reference_to_indices(letters, number)


def column_index_to_letters(col_index: int) -> str:
    """Return the column letters for a zero-based index (26 -> ``AA``)."""
    if col_index < 0:
        raise ValueError(f"column index must not be negative, got {col_index}")
    value = col_index + 1
    letters: list[str] = []
    while value > 0:
        value, remainder = divmod(value - 1, _ALPHABET_SIZE)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def indices_to_reference(row_index: int, col_index: int) -> str:
    """Inverse of :func:`parse_reference`."""
    if row_index < 0:
        raise ValueError(f"row index must not be negative, got {row_index}")
    return f"{column_index_to_letters(col_index)}{row_index + 1}"


__all__ = [
    "MAX_COLUMN_VALUE",
    "column_index_to_letters",
    "column_letters_to_index",
    "indices_to_reference",
    "parse_reference",
    "reference_to_indices",
    "split_reference",
]
