"""Row encoding and decoding for the csvgrid text format.

Format summary:

* rows are separated by two line feeds (``"\\n\\n"``), and every encoded row,
  including the last one, is followed by that delimiter;
* fields are separated by commas;
* a field is wrapped in double quotes if and only if it contains a comma.
  Quote characters inside a field are not escaped.

Decoding drops the delimiter that terminates the last row and splits the
rest into row blocks, so blank rows keep their positions at the start and end
of the file as well as in the middle. Content written with ``"\\r\\n"`` line
endings does not split into rows; callers that read such content must pass
it through :func:`normalize_newlines` first.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

ROW_DELIMITER = "\n\n"
FIELD_DELIMITER = ","
QUOTE = '"'

_OUTSIDE_QUOTES = 0
_INSIDE_QUOTES = 1


def _encode_field(value: object) -> str:
    text = "" if value is None else str(value)
    if FIELD_DELIMITER in text:
        return f"{QUOTE}{text}{QUOTE}"
    return text


def encode_row(fields: Optional[Sequence[object]]) -> str:
    """Return ``fields`` as one encoded row, delimiter included.

    ``None`` and an empty sequence both encode to a bare delimiter, i.e. a
    blank row.
    """
    if not fields:
        return ROW_DELIMITER
    return FIELD_DELIMITER.join(_encode_field(value) for value in fields) + ROW_DELIMITER


def encode_rows(rows: Iterable[Optional[Sequence[object]]]) -> str:
    return "".join(encode_row(row) for row in rows)


def _clean_token(token: str) -> str:
    return token.strip().replace(QUOTE, "")


def tokenize_block(block: str) -> list[str]:
    """
    Split one row block into field values.

    The scanner has two states. Outside quotes, characters accumulate into a
    bare token that ends at a comma or a quote. A quote switches to the inside
    state, which collects everything up to the next quote, commas included.

    Commas only end tokens, so consecutive commas never yield empty fields.
    An opening quote with no closing quote is dropped and scanning resumes in
    the outside state just after it.

    Example:
        >>> tokenize_block('a,"b,c",d')
        ['a', 'b,c', 'd']
    """
    tokens: list[str] = []
    bare: list[str] = []
    state = _OUTSIDE_QUOTES
    quote_start = -1
    position = 0
    length = len(block)

    while position < length:
        char = block[position]
        if state == _OUTSIDE_QUOTES:
            if char == QUOTE:
                if bare:
                    tokens.append(_clean_token("".join(bare)))
                    bare = []
                state = _INSIDE_QUOTES
                quote_start = position
            elif char == FIELD_DELIMITER:
                if bare:
                    tokens.append(_clean_token("".join(bare)))
                    bare = []
            else:
                bare.append(char)
        elif char == QUOTE:
            tokens.append(_clean_token(block[quote_start : position + 1]))
            state = _OUTSIDE_QUOTES
        position += 1

        if position == length and state == _INSIDE_QUOTES:
            # Unterminated quote: skip it and rescan the rest as unquoted text.
            state = _OUTSIDE_QUOTES
            position = quote_start + 1

    if bare:
        tokens.append(_clean_token("".join(bare)))
    return tokens


def decode_text(text: str) -> list[list[str]]:
    """Decode a whole file's text into rows of fields.

    Every block decodes to one row and an empty block decodes to an empty row
    (zero fields), so ``decode_text(encode_rows(rows))`` keeps blank rows
    wherever they are. Text without a final delimiter has its trailing
    whitespace dropped instead; whitespace-only text decodes to no rows.
    """
    if text.endswith(ROW_DELIMITER):
        body = text[: -len(ROW_DELIMITER)]
    else:
        body = text.rstrip()
        if not body.strip():
            return []
    rows = [tokenize_block(block) if block else [] for block in body.split(ROW_DELIMITER)]
    logger.debug("Decoded %d row(s) from %d character(s).", len(rows), len(text))
    return rows


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


__all__ = [
    "FIELD_DELIMITER",
    "QUOTE",
    "ROW_DELIMITER",
    "decode_text",
    "encode_row",
    "encode_rows",
    "normalize_newlines",
    "tokenize_block",
]
