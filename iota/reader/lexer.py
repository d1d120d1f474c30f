"""Tokenizer: raw source text to a flat list of tokens."""

from __future__ import annotations

import re
from typing import Optional

PAREN_RE = re.compile(r"([()])")
COMMENT_RE = re.compile(r";[^\n]*")


def tokenize(source: str) -> Optional[list[str]]:
    """Split `source` into tokens.

    Parentheses always stand alone, `;` starts a comment running to the end of
    the line, and newlines count as whitespace. Returns None when there is
    nothing to read, so callers can tell blank input from a `()` form.
    """
    padded = PAREN_RE.sub(r" \1 ", source)
    tokens = COMMENT_RE.sub(" ", padded).split()
    return tokens or None
