"""
Word-boundary lookup inside a text buffer.
"""

from dataclasses import dataclass
from typing import Optional

WORD_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789'_-")


@dataclass(frozen=True)
class WordSpan:
    """A half-open range ``[start, end)`` of a buffer and the text it covers."""
    start: int
    end: int
    text: str

    def __len__(self) -> int:
        return self.end - self.start


def find_word_before(buffer: str, pos: int) -> Optional[WordSpan]:
    """
    Find the word that ends at or before ``pos``, skipping trailing whitespace.

    Only ASCII letters, digits and ``'_-`` count as word characters; any
    other character is a boundary.

    Args:
        buffer: The full text.
        pos: Cursor offset, typically just after an inserted space.

    Returns:
        The word span, or None if there is no word before ``pos``.
    """
    i = min(pos, len(buffer)) - 1

    while i >= 0 and buffer[i].isspace():
        i -= 1
    if i < 0:
        return None

    end = i + 1
    while i >= 0 and buffer[i] in WORD_CHARS:
        i -= 1

    start = i + 1
    if start >= end:
        return None
    return WordSpan(start=start, end=end, text=buffer[start:end])
