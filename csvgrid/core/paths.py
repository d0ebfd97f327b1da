"""Utilities for resolving the file a grid store is bound to."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_EXTENSION

Pathish = Union[str, "Path"]


def resolve_root(root_dir: Optional[Pathish] = None) -> Path:
    """Return ``root_dir`` as a Path, falling back to the working directory."""
    if root_dir is None:
        return Path.cwd()
    return Path(root_dir)


def ensure_extension(name: str, extension: str = DEFAULT_EXTENSION) -> str:
    """
    Return ``name`` ending in exactly one ``extension``.

    Parameters
    ----------
    name:
        Base name supplied by the caller, with or without the extension.
    extension:
        Suffix including the leading dot. Matching is case-sensitive, so
        ``"data.CSV"`` becomes ``"data.CSV.csv"``.
    """
    text = str(name or "").strip()
    if not text:
        raise ValueError("file name must not be empty")
    if Path(text).name != text:
        raise ValueError(f"file name must not contain directories: {name!r}")
    if text.endswith(extension) and len(text) > len(extension):
        return text
    return f"{text}{extension}"


def resolve_filepath(root_dir: Pathish, filename: str) -> Path:
    """Join ``filename`` onto the bound root directory."""
    return Path(root_dir) / filename


__all__ = ["Pathish", "ensure_extension", "resolve_filepath", "resolve_root"]
