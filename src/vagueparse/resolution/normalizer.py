"""Stage 1: canonical lower-case text for pattern matching."""

from __future__ import annotations

import re

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lower-case, replace punctuation with spaces, collapse whitespace.

    >>> normalize_text("  Make   the THING work!!! ")
    'make the thing work'
    """
    lowered = text.lower()
    spaced = _PUNCTUATION.sub(" ", lowered)
    return _WHITESPACE.sub(" ", spaced).strip()
