"""Scanning helpers that pull OIDs and words out of a line of text."""

from __future__ import annotations

import re
import unicodedata

OID_CHARS = frozenset("0123456789.")

TABSTOP = 8

_KEYWORD = re.compile(r"[\w:-]+")


def extract_oid(line: str, col: int) -> str:
    """Return the run of digits and dots touching ``col``.

    ``col`` is a 0-based character index. The character at ``col`` and
    everything to its right is scanned first, then everything to its left;
    the result is ``left + right``. Dotted structure is not validated, so
    ``"..."`` or ``"."`` come back as they are. An empty string means there
    is no OID character next to the cursor.
    """

    col = max(0, min(col, len(line)))

    end = col
    while end < len(line) and line[end] in OID_CHARS:
        end += 1

    start = col
    while start > 0 and line[start - 1] in OID_CHARS:
        start -= 1

    return line[start:col] + line[col:end]


def normalize_oid(oid: str) -> str:
    """Rewrite ``1.1...`` to ``.1...`` for the default translator."""

    if oid[:3] == "1.1":
        return oid[1:]
    return oid


def _cell_width(char: str, cell: int) -> int:
    """Display cells taken by ``char`` when it starts at 1-based ``cell``."""

    if char == "\t":
        return TABSTOP - (cell - 1) % TABSTOP
    if unicodedata.combining(char):
        return 0
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


def virtual_column_to_index(line: str, vcol: int) -> int:
    """Convert a 1-based display column to a 0-based character index.

    Wide characters occupy two display cells and a tab runs to the next
    multiple-of-8 tabstop; a column that lands inside either still maps to
    that character. Combining marks take no cells and are never selected.
    Columns past the end of the line map to ``len(line)``.
    """

    if vcol <= 1:
        return 0
    cell = 1
    for index, char in enumerate(line):
        width = _cell_width(char, cell)
        if vcol < cell + width:
            return index
        cell += width
    return len(line)


def word_at(line: str, col: int) -> str:
    """Return the keyword under ``col``, or the next one to the right.

    Keyword characters are letters, digits, ``_``, ``-`` and ``:`` so that
    qualified names such as ``SNMPv2-MIB::sysDescr`` stay in one piece.
    """

    col = max(0, min(col, len(line)))
    for match in _KEYWORD.finditer(line):
        if match.end() > col:
            return match.group(0)
    return ""
