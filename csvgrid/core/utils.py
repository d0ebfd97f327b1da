"""Utility functions for csvgrid."""

from __future__ import annotations

import math
import re

from .errors import InvalidRowNumber

_ROW_NUMBER_PATTERN = re.compile(r"^[+]?\d+$")


def parse_row_number(value: object) -> int:
    """Return ``value`` as a 1-indexed row number.

    Accepts ints, integral floats and numeric strings such as ``"3"``.
    Booleans, fractions, NaN, blanks and anything below 1 raise
    :class:`InvalidRowNumber`.

    Example:
        >>> parse_row_number(" 4 ")
        4
    """
    if isinstance(value, bool):
        raise InvalidRowNumber(value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            raise InvalidRowNumber(value)
        number = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _ROW_NUMBER_PATTERN.match(text):
            raise InvalidRowNumber(value)
        number = int(text)
    else:
        raise InvalidRowNumber(value)
    if number < 1:
        raise InvalidRowNumber(value)
    return number


__all__ = ["parse_row_number"]
