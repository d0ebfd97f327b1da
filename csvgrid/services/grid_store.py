"""File-backed grid of text cells with spreadsheet-style access."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from csvgrid.core.config import GridStoreConfig
from csvgrid.core.paths import Pathish, resolve_root
from csvgrid.io.address import parse_reference
from csvgrid.io.codec import decode_text, encode_row
from csvgrid.models import FileBinding, RenameResult
from csvgrid.services.row_editor import RowEditor

logger = logging.getLogger(__name__)

Row = list[str]


class GridStore:
    """
    Grid of rows persisted to a single ``.csv`` file.

    The grid only exists as file content: every read parses the whole file
    and every mutation writes it back. Nothing is cached between calls and
    access is not synchronized, so concurrent writers race and the last one
    wins.

    Parameters
    ----------
    name:
        File name, with or without the extension.
    root_dir:
        Directory holding the file. Overrides ``config.root_dir``; when both
        are absent the current working directory is used.
    config:
        Extension and text encoding settings.
    """

    def __init__(
        self,
        name: str,
        *,
        root_dir: Optional[Pathish] = None,
        config: Optional[GridStoreConfig] = None,
    ) -> None:
        self._config = config or GridStoreConfig()
        root = resolve_root(root_dir if root_dir is not None else self._config.root_dir)
        self._binding = FileBinding.resolve(name, root, self._config.extension)
        self._editor = RowEditor(self)
        self._ensure_file()

    def __repr__(self) -> str:
        return f"GridStore(filepath={str(self.filepath)!r})"

    # Binding ----------------------------------------------------------

    @property
    def binding(self) -> FileBinding:
        return self._binding

    @property
    def filename(self) -> str:
        return self._binding.filename

    @filename.setter
    def filename(self, name: str) -> None:
        self.rebind(name)

    @property
    def filepath(self) -> Path:
        return self._binding.filepath

    @property
    def root_dir(self) -> Path:
        return self._binding.root_dir

    @property
    def config(self) -> GridStoreConfig:
        return self._config

    def rebind(self, name: str) -> FileBinding:
        """Point the store at ``name`` in the same directory.

        Only the binding changes: no file is moved or created.
        """
        binding = FileBinding.resolve(name, self.root_dir, self._config.extension)
        self._binding = binding
        return binding

    def exists(self) -> bool:
        return self.filepath.is_file()

    def _ensure_file(self) -> None:
        if self.filepath.exists():
            return
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        # Append mode creates the file without truncating a concurrent writer's content.
        with self._open("a"):
            pass
        logger.info("Created empty grid file '%s'.", self.filepath)

    def _open(self, mode: str):
        # newline="" keeps the on-disk delimiters exactly as encoded.
        return self.filepath.open(mode, encoding=self._config.encoding, newline="")

    # Writing ----------------------------------------------------------

    def clear(self) -> None:
        """Truncate the bound file to zero length."""
        with self._open("w"):
            pass
        logger.debug("Cleared '%s'.", self.filepath)

    def write_row(self, fields: Optional[Sequence[object]] = None) -> None:
        """Append one row; ``None`` appends a blank row."""
        encoded = encode_row(fields)
        with self._open("a") as handle:
            handle.write(encoded)
        logger.debug("Appended row with %d field(s) to '%s'.", len(fields or ()), self.filename)

    def write_rows(self, rows: Iterable[Optional[Sequence[object]]]) -> None:
        for row in rows:
            self.write_row(row)

    def write_file(self, rows: Iterable[Optional[Sequence[object]]]) -> None:
        """Replace the whole file content with ``rows``."""
        rows = list(rows)
        self.clear()
        self.write_rows(rows)
        logger.debug("Rewrote '%s' with %d row(s).", self.filename, len(rows))

    # Reading ----------------------------------------------------------

    def read_text(self) -> str:
        with self._open("r") as handle:
            return handle.read()

    def parse_file(self) -> list[Row]:
        """Return every row in the file. Never modifies the file."""
        return decode_text(self.read_text())

    def row_count(self) -> int:
        return len(self.parse_file())

    def get_cell(self, reference: str) -> str:
        """Return the value at ``reference`` (e.g. ``"B3"``), or ``""`` when absent."""
        row_index, col_index = parse_reference(reference)
        rows = self.parse_file()
        if row_index >= len(rows):
            return ""
        row = rows[row_index]
        if col_index >= len(row):
            return ""
        return row[col_index]

    def get_row(self, row_number: object) -> Row:
        return self._editor.get_row(row_number)

    # Row edits --------------------------------------------------------

    def delete_row(self, row_number: object) -> list[Row]:
        return self._editor.delete_row(row_number)

    def delete_row_and_shift(self, row_number: object) -> list[Row]:
        return self._editor.delete_row_and_shift(row_number)

    # File operations --------------------------------------------------

    def rename(self, new_name: str) -> RenameResult:
        """
        Rename the bound file to ``new_name`` in the same directory.

        Failures are not raised. They are logged and returned as a
        :class:`RenameResult` whose ``binding`` is the unchanged current one.
        """
        current = self._binding
        try:
            target = FileBinding.resolve(new_name, current.root_dir, self._config.extension)
            current.filepath.rename(target.filepath)
        except (OSError, ValueError) as exc:
            result = RenameResult.failure(current, exc)
            logger.warning(
                "Could not rename '%s' to %r: %s (%s)",
                current.filename,
                new_name,
                result.message,
                exc,
            )
            return result

        self._binding = target
        logger.info("Renamed '%s' to '%s'.", current.filename, target.filename)
        return RenameResult.success(target)

    def copy_from(self, source_path: Pathish) -> None:
        """Overwrite the bound file with a byte copy of ``source_path``."""
        shutil.copyfile(Path(source_path), self.filepath)
        logger.info("Copied '%s' into '%s'.", source_path, self.filepath)

    def copy(self, source: "GridStore") -> None:
        """Overwrite the bound file with the content of another store's file."""
        if not isinstance(source, GridStore):
            raise TypeError(
                f"copy() expects a GridStore, got {type(source).__name__}"
            )
        self.copy_from(source.filepath)


GridSource = Union[GridStore, Sequence[Sequence[str]]]


def rows_of(source: GridSource) -> list[Row]:
    """Return the rows of a store, or a copy of rows already in memory."""
    if isinstance(source, GridStore):
        return source.parse_file()
    return [list(row) for row in source]


__all__ = ["GridSource", "GridStore", "Row", "rows_of"]
