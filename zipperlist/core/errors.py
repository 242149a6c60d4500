"""Exceptions raised by zipperlist.

Boundary moves (left at the start, right past the end, popping an empty
left side) are not errors; they return the zipper unchanged. The
exceptions here cover caller mistakes and internal consistency faults.
"""


class ZipperError(Exception):
    """Base class for all zipperlist errors."""
    pass


class EmptySequenceError(ZipperError, ValueError):
    """Raised when a constructor that needs a focused element gets none.

    ``Zipper.from_list([])`` and ``Zipper.from_lists(xs, [])`` have no
    element to put under the cursor.
    """
    pass


class AbsentCursorError(ZipperError, LookupError):
    """Raised when reading the cursor of a zipper with no focused element."""
    pass


class InvariantViolationError(ZipperError, RuntimeError):
    """Raised when a zipper has an absent cursor but a non-empty right side.

    No zipper operation produces this state; seeing it means a zipper was
    assembled by hand incorrectly.
    """
    pass


class FoldConfigError(ZipperError, ValueError):
    """Raised when a FoldConfig fails validation."""
    pass
