"""Decide whether the text under the cursor is an OID or a label."""

from __future__ import annotations

from .extraction import extract_oid
from .structures import ByLabel, ByOid, TranslationRequest


def infer_request(line: str, col: int) -> TranslationRequest:
    """Classify the cursor position as an OID or a label lookup.

    A token of two or more OID characters is an OID. A lone digit, a lone
    dot or nothing at all falls back to a label lookup with no seed, so the
    caller takes the current word instead.
    """

    token = extract_oid(line, col)
    if len(token) > 1:
        return ByOid(token)
    return ByLabel(None)
