"""Exact, leftmost literal matching over UTF-8 buffers."""

from __future__ import annotations

from .models import Range


def encode(text: str) -> bytes:
    """Encode text into the buffer representation ranges are measured in."""
    return text.encode("utf-8")


def locate(buffer: bytes, pattern: str) -> Range | None:
    """Find the first exact occurrence of ``pattern`` in ``buffer``.

    The search is forward, case-sensitive and literal. Offsets are bytes of the
    UTF-8 encoding; since UTF-8 is self-synchronizing, a match of a whole
    encoded pattern always starts and ends on a character boundary.

    Returns:
        Range of the match, or None if the pattern does not occur.

    Raises:
        ValueError: If ``pattern`` is empty.
    """
    if not pattern:
        raise ValueError("Cannot locate an empty pattern")

    needle = encode(pattern)
    start = buffer.find(needle)
    if start < 0:
        return None
    return Range(start, len(needle))
