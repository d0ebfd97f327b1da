"""Exception types raised by csvgrid.

File system failures are not wrapped: read, write, append and copy errors
surface as the ``OSError`` raised by Python. Rename failures are the one
I/O error that is caught, see :class:`csvgrid.models.RenameResult`.
"""

from __future__ import annotations


class GridStoreError(Exception):
    """Base class for validation errors raised by the grid store."""


class InvalidReference(GridStoreError, ValueError):
    """A cell reference is not column letters followed by a row number."""

    def __init__(self, reference: object, reason: str = "") -> None:
        self.reference = reference
        message = f"invalid cell reference: {reference!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidRowNumber(GridStoreError, ValueError):
    """A row number is not a positive integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"row number must be a positive integer, got {value!r}")


__all__ = ["GridStoreError", "InvalidReference", "InvalidRowNumber"]
