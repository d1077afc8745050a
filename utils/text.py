from __future__ import annotations

import re
from typing import List

# Boundary sits right after a Latin or full-width sentence terminal and eats
# the whitespace that follows it.
SENTENCE_BOUNDARY = re.compile(r"(?<=[。！？.?!])\s*")


def code_point_length(text: str) -> int:
    return len(text)


def split_sentences(text: str) -> List[str]:
    """Split ``text`` into sentence-like fragments, preserving order."""
    return [fragment for fragment in SENTENCE_BOUNDARY.split(text) if fragment]
