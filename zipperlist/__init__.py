"""zipperlist - Immutable list zipper for Python.

A Zipper is a list with a movable focus. Moving the focus one step and
editing at the focus (insert, delete, replace, push, pop) are O(1), and
every operation returns a new zipper.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from zipperlist import Zipper

    z = Zipper.from_list([1, 2, 3])
    z = z.move_right().insert(9)     # Zipper(left=[1], cursor=9, right=[2, 3])
    z.to_list()                      # [1, 9, 2, 3]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Iterating or folding over a zipper starts at the cursor. Use
``cursor_start()`` (or ``origin="start"`` in the API) to cover the whole list.
"""

__version__ = "0.2.0"

from .core import (
    ConsList,
    NIL,
    Zipper,
    check_invariants,
    ZipperError,
    EmptySequenceError,
    AbsentCursorError,
    InvariantViolationError,
    FoldConfigError,
    Directive,
    Done,
    Halted,
    Suspended,
    Continuation,
    ZipperTraverser,
    PositionTraverser,
    ValueTraverser,
    FoldCollector,
    CountCollector,
    MapCollector,
    ValueCollector,
    SumCollector,
    FindCollector,
    CustomCollector,
)
from .config import FoldConfig, FoldOrigin
from .planning import FoldPlan
from .api import (
    fold,
    collect,
    count,
    member,
    find,
    to_values,
    map_cursor,
    into,
    from_iterable,
)

__all__ = [
    "__version__",
    # Core
    "ConsList",
    "NIL",
    "Zipper",
    "check_invariants",
    # Errors
    "ZipperError",
    "EmptySequenceError",
    "AbsentCursorError",
    "InvariantViolationError",
    "FoldConfigError",
    # Fold protocol
    "Directive",
    "Done",
    "Halted",
    "Suspended",
    "Continuation",
    "ZipperTraverser",
    "PositionTraverser",
    "ValueTraverser",
    "FoldCollector",
    "CountCollector",
    "MapCollector",
    "ValueCollector",
    "SumCollector",
    "FindCollector",
    "CustomCollector",
    # Config and planning
    "FoldConfig",
    "FoldOrigin",
    "FoldPlan",
    # API
    "fold",
    "collect",
    "count",
    "member",
    "find",
    "to_values",
    "map_cursor",
    "into",
    "from_iterable",
]
