"""Deterministic text-patch engine.

Locates the first exact occurrence of a literal pattern and splices content
around or in place of it. Four operations are supported:

- prepend: insert content before the match
- append: insert content after the match
- replace: replace the match with content
- swap: exchange the match with the first occurrence of a second pattern

An empty search pattern applies the operation to the document edges.
"""

from .applier import apply_replacement
from .applier import compute_patch
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

__all__ = [
    # Models
    "Range",
    "Operation",
    "Prepend",
    "Append",
    "Replace",
    "Swap",
    "Edit",
    "PatchResult",
    # Engine
    "locate",
    "compute_patch",
    "apply_replacement",
    "edit_for",
]
