"""Text format and addressing helpers for csvgrid."""

from .address import (
    column_index_to_letters,
    indices_to_reference,
    parse_reference,
    reference_to_indices,
    split_reference,
)
from .codec import (
    FIELD_DELIMITER,
    QUOTE,
    ROW_DELIMITER,
    decode_text,
    encode_row,
    encode_rows,
    normalize_newlines,
    tokenize_block,
)

__all__ = [
    "FIELD_DELIMITER",
    "QUOTE",
    "ROW_DELIMITER",
    "column_index_to_letters",
    "decode_text",
    "encode_row",
    "encode_rows",
    "indices_to_reference",
    "normalize_newlines",
    "parse_reference",
    "reference_to_indices",
    "split_reference",
    "tokenize_block",
]
