"""Data types of the patch engine.

- Range: byte span of a located pattern inside a UTF-8 buffer
- Operation: the wire-level operation name
- Prepend / Append / Replace / Swap: edit variants carrying only the field they use
- PatchResult: the outcome of one patch computation
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True, order=True)
class Range:
    """A span ``[start, start + length)`` of byte offsets into a UTF-8 buffer."""

    start: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.start + self.length

    def overlaps(self, other: Range) -> bool:
        """Check if either range starts inside the other."""
        return (self.start <= other.start < self.end) or (other.start <= self.start < other.end)

    def slice(self, buffer: bytes) -> bytes:
        return buffer[self.start : self.end]


class Operation(str, Enum):
    """Operation types that can be performed on matched text."""

    PREPEND = "prepend"
    APPEND = "append"
    REPLACE = "replace"
    SWAP = "swap"


@dataclass(frozen=True)
class Prepend:
    """Insert ``content`` before the matched text."""

    content: str


@dataclass(frozen=True)
class Append:
    """Insert ``content`` after the matched text."""

    content: str


@dataclass(frozen=True)
class Replace:
    """Replace the matched text with ``content``."""

    content: str


@dataclass(frozen=True)
class Swap:
    """Exchange the matched text with the first occurrence of ``target``."""

    target: str


Edit = Union[Prepend, Append, Replace, Swap]


def edit_for(operation: Operation | str, content: str) -> Edit:
    """Build the edit variant for a request's ``(operation, content)`` pair.

    Requests reuse one ``content`` field for both replacement text and the
    swap target; this is the single place where the two meanings split.
    """
    operation = Operation(operation)
    if operation is Operation.PREPEND:
        return Prepend(content)
    if operation is Operation.APPEND:
        return Append(content)
    if operation is Operation.REPLACE:
        return Replace(content)
    return Swap(content)


def operation_of(edit: Edit) -> Operation:
    """Return the wire-level operation name of an edit variant."""
    if isinstance(edit, Prepend):
        return Operation.PREPEND
    if isinstance(edit, Append):
        return Operation.APPEND
    if isinstance(edit, Replace):
        return Operation.REPLACE
    return Operation.SWAP


@dataclass(frozen=True)
class PatchResult:
    """The new text produced by one patch, plus how it was produced."""

    content: str
    operation: Operation
    match: Range | None = None
    target: Range | None = None
    swap_degraded: bool = False

    @property
    def total_chars(self) -> int:
        return len(self.content)

    @property
    def total_bytes(self) -> int:
        return len(self.content.encode("utf-8"))
