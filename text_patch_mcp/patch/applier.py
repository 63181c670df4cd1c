"""Patch applier: turns a located match and an edit into new text.

All splicing is done on the UTF-8 byte buffer using ranges produced by the
matcher, and the result is decoded once at the end. The source string is
never modified; every call builds a new value.
"""

from __future__ import annotations

import logging

from ..exceptions import NoMatchError
from ..exceptions import NoSwapTargetError
from .matcher import encode
from .matcher import locate
from .models import Append
from .models import Edit
from .models import Operation
from .models import PatchResult
from .models import Prepend
from .models import Range
from .models import Replace
from .models import Swap
from .models import edit_for
from .models import operation_of

logger = logging.getLogger(__name__)


def _apply_to_edges(source: str, edit: Edit) -> str:
    """Apply an edit when there is no search pattern."""
    if isinstance(edit, Append):
        return source + edit.content
    if isinstance(edit, Prepend):
        return edit.content + source
    if isinstance(edit, Replace):
        return edit.content
    # Swapping with an empty anchor is a no-op
    return source


def _splice(buffer: bytes, start: int, end: int, insert: bytes) -> bytes:
    return buffer[:start] + insert + buffer[end:]


def _swap_ranges(buffer: bytes, first: Range, second: Range) -> bytes:
    """Exchange the text of two disjoint ranges, keeping everything else verbatim."""
    earlier, later = sorted((first, second))
    return b"".join(
        (
            buffer[: earlier.start],
            later.slice(buffer),
            buffer[earlier.end : later.start],
            earlier.slice(buffer),
            buffer[later.end :],
        )
    )


def compute_patch(source: str, search: str, edit: Edit) -> PatchResult:
    """Apply ``edit`` to the first occurrence of ``search`` in ``source``.

    Args:
        source: The text to patch
        search: Literal pattern to anchor the edit on; empty means the document edges
        edit: One of Prepend, Append, Replace or Swap

    Returns:
        PatchResult holding the new text and the ranges that were used

    Raises:
        NoMatchError: If ``search`` is not empty and does not occur in ``source``
        NoSwapTargetError: If ``edit`` is a Swap whose target does not occur in ``source``
    """
    operation = operation_of(edit)

    if not search:
        return PatchResult(content=_apply_to_edges(source, edit), operation=operation)

    buffer = encode(source)
    match = locate(buffer, search)
    if match is None:
        raise NoMatchError(search)

    if isinstance(edit, Prepend):
        patched = _splice(buffer, match.start, match.start, encode(edit.content))
    elif isinstance(edit, Append):
        patched = _splice(buffer, match.end, match.end, encode(edit.content))
    elif isinstance(edit, Replace):
        patched = _splice(buffer, match.start, match.end, encode(edit.content))
    else:
        return _compute_swap(buffer, match, edit)

    return PatchResult(content=patched.decode("utf-8"), operation=operation, match=match)


def _compute_swap(buffer: bytes, match: Range, edit: Swap) -> PatchResult:
    # An empty target cannot identify a span to exchange with
    target = locate(buffer, edit.target) if edit.target else None
    if target is None:
        raise NoSwapTargetError(edit.target)

    if match.overlaps(target):
        logger.debug(
            "Swap ranges overlap (match %s, target %s); applying as replace",
            match,
            target,
        )
        patched = _splice(buffer, match.start, match.end, encode(edit.target))
        return PatchResult(
            content=patched.decode("utf-8"),
            operation=Operation.SWAP,
            match=match,
            target=target,
            swap_degraded=True,
        )

    patched = _swap_ranges(buffer, match, target)
    return PatchResult(
        content=patched.decode("utf-8"),
        operation=Operation.SWAP,
        match=match,
        target=target,
    )


def apply_replacement(source: str, search: str, operation: Operation | str, content: str) -> str:
    """Patch ``source`` and return only the new text.

    ``content`` is the inserted or replacement text for prepend, append and
    replace, and the second pattern to exchange with for swap.
    """
    return compute_patch(source, search, edit_for(operation, content)).content
