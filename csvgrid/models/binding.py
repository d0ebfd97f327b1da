"""File binding model for grid stores."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from csvgrid.core.config import DEFAULT_EXTENSION
from csvgrid.core.paths import Pathish, ensure_extension, resolve_filepath


@dataclass(frozen=True)
class FileBinding:
    """Name and resolved path of the file a store reads and writes."""

    filename: str
    filepath: Path

    @classmethod
    def resolve(
        cls, name: str, root_dir: Pathish, extension: str = DEFAULT_EXTENSION
    ) -> "FileBinding":
        """Build a binding for ``name`` inside ``root_dir``."""
        filename = ensure_extension(name, extension)
        return cls(filename=filename, filepath=resolve_filepath(root_dir, filename))

    @property
    def root_dir(self) -> Path:
        return self.filepath.parent

    def __str__(self) -> str:
        return str(self.filepath)
