"""Core building blocks for zipperlist.

This package contains the Zipper value type, the persistent list it is
stored in, and the fold protocol that exposes it as a sequence.
"""

from .conslist import ConsList, NIL
from .errors import (
    ZipperError,
    EmptySequenceError,
    AbsentCursorError,
    InvariantViolationError,
    FoldConfigError,
)
from .traverser import (
    Directive,
    Done,
    Halted,
    Suspended,
    Continuation,
    fold,
    ZipperTraverser,
    PositionTraverser,
    ValueTraverser,
)
from .zipper import Zipper, check_invariants
from .collector import (
    FoldCollector,
    CountCollector,
    MapCollector,
    ValueCollector,
    SumCollector,
    FindCollector,
    CustomCollector,
)

__all__ = [
    "ConsList",
    "NIL",
    "ZipperError",
    "EmptySequenceError",
    "AbsentCursorError",
    "InvariantViolationError",
    "FoldConfigError",
    "Directive",
    "Done",
    "Halted",
    "Suspended",
    "Continuation",
    "fold",
    "ZipperTraverser",
    "PositionTraverser",
    "ValueTraverser",
    "Zipper",
    "check_invariants",
    "FoldCollector",
    "CountCollector",
    "MapCollector",
    "ValueCollector",
    "SumCollector",
    "FindCollector",
    "CustomCollector",
]
