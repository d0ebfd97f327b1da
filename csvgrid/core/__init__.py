"""Core helpers for csvgrid."""

from .config import DEFAULT_ENCODING, DEFAULT_EXTENSION, GridStoreConfig
from .errors import GridStoreError, InvalidReference, InvalidRowNumber
from .paths import ensure_extension, resolve_filepath, resolve_root
from .utils import parse_row_number

__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_EXTENSION",
    "GridStoreConfig",
    "GridStoreError",
    "InvalidReference",
    "InvalidRowNumber",
    "ensure_extension",
    "parse_row_number",
    "resolve_filepath",
    "resolve_root",
]
