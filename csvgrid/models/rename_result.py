"""Outcome of renaming the file behind a grid store."""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .binding import FileBinding


class RenameFailureKind(str, Enum):
    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    RESOURCE_BUSY = "resource-busy"
    OTHER = "other"

    @classmethod
    def from_error(cls, error: Exception) -> "RenameFailureKind":
        """Classify an error raised while renaming; invalid names are ``OTHER``."""
        code = getattr(error, "errno", None)
        if isinstance(error, FileNotFoundError) or code == errno.ENOENT:
            return cls.NOT_FOUND
        if isinstance(error, PermissionError) or code in (errno.EACCES, errno.EPERM):
            return cls.PERMISSION_DENIED
        if code == errno.EBUSY:
            return cls.RESOURCE_BUSY
        return cls.OTHER

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    RenameFailureKind.NOT_FOUND: "File not found.",
    RenameFailureKind.PERMISSION_DENIED: "The user does not have permission to modify the file.",
    RenameFailureKind.RESOURCE_BUSY: "The file is being used by another program.",
    RenameFailureKind.OTHER: "Unexpected error while renaming the file.",
}


@dataclass(frozen=True)
class RenameResult:
    """Binding in effect after a rename attempt, plus the failure if any.

    On failure ``binding`` is the unchanged binding from before the call.
    """

    binding: FileBinding
    kind: Optional[RenameFailureKind] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.kind is None

    @property
    def message(self) -> str:
        if self.kind is None:
            return f"Renamed to '{self.binding.filename}'."
        return self.kind.description

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, binding: FileBinding) -> "RenameResult":
        return cls(binding=binding)

    @classmethod
    def failure(cls, binding: FileBinding, error: Exception) -> "RenameResult":
        return cls(binding=binding, kind=RenameFailureKind.from_error(error), error=error)
