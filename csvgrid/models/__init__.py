"""Public exports for csvgrid data models."""

from .binding import FileBinding
from .rename_result import RenameFailureKind, RenameResult

__all__ = ["FileBinding", "RenameFailureKind", "RenameResult"]
