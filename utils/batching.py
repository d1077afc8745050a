from __future__ import annotations

from typing import List, Sequence


def pack_fragments(fragments: Sequence[str], *, max_chars: int) -> List[str]:
    """Greedily pack fragments into space-joined chunks of at most ``max_chars``.

    A fragment that is longer than ``max_chars`` on its own is kept whole and
    becomes an oversized chunk.
    """
    chunks: List[str] = []
    current = ""
    for fragment in fragments:
        if current and len(current + fragment) > max_chars:
            chunks.append(current.strip())
            current = ""
        current += fragment + " "
    if current.strip():
        chunks.append(current.strip())
    return chunks
