"""The Zipper value type.

A Zipper is a list with a movable focus. It is stored as three parts:

    left   - elements before the cursor, nearest first (reversed)
    cursor - the focused element, or absent when focus is past the end
    right  - elements after the cursor, in natural order

so that ``reverse(left) ++ [cursor] ++ right`` is the logical list. Moving
the focus one step and editing at the focus only touch the heads of the
two sides, which makes them O(1).

Every operation returns a new Zipper. Instances are never modified, and
the two sides are persistent ConsLists, so zippers derived from each
other share most of their storage.

Example:
    >>> z = Zipper.from_lists([1, 2, 3], [4, 5])
    >>> z
    Zipper(left=[3, 2, 1], cursor=4, right=[5])
    >>> z.move_right().insert(9).to_list()
    [1, 2, 3, 4, 9, 5]
"""

import logging
from typing import Any, Generic, Iterable, Iterator, List, Tuple, TypeVar

from .conslist import NIL, ConsList
from .errors import AbsentCursorError, EmptySequenceError, InvariantViolationError
from .traverser import PositionTraverser, ValueTraverser

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Keyword default for Zipper(cursor=...); never stored in a zipper.
_NO_CURSOR = object()


def _as_conslist(items: Iterable[T]) -> ConsList[T]:
    if isinstance(items, ConsList):
        return items
    return ConsList.from_iterable(items)


class Zipper(Generic[T]):
    """Immutable list zipper.

    The cursor is held as an explicit optional: a 1-tuple when present and
    an empty tuple when absent. Any value, ``None`` included, can be an
    element without being mistaken for "no cursor".

    Args:
        left: Elements before the cursor, nearest first (stored order)
        cursor: Focused element; omit for an absent cursor
        right: Elements after the cursor, in natural order
    """

    __slots__ = ("_left", "_focus", "_right")

    def __init__(self, left: Iterable[T] = (), cursor: Any = _NO_CURSOR, right: Iterable[T] = ()):
        focus: Tuple[T, ...] = () if cursor is _NO_CURSOR else (cursor,)
        object.__setattr__(self, "_left", _as_conslist(left))
        object.__setattr__(self, "_focus", focus)
        object.__setattr__(self, "_right", _as_conslist(right))

    @classmethod
    def _make(cls, left: ConsList[T], focus: Tuple[T, ...], right: ConsList[T]) -> "Zipper[T]":
        # Fast path for operations; the parts are already ConsLists.
        zipper = object.__new__(cls)
        object.__setattr__(zipper, "_left", left)
        object.__setattr__(zipper, "_focus", focus)
        object.__setattr__(zipper, "_right", right)
        return zipper

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    # Constructors

    @classmethod
    def empty(cls) -> "Zipper[T]":
        """Return a zipper with no elements and an absent cursor."""
        return cls._make(NIL, (), NIL)

    @classmethod
    def from_list(cls, xs: Iterable[T]) -> "Zipper[T]":
        """Return a zipper over ``xs`` focused on its first element.

        Raises:
            EmptySequenceError: If ``xs`` is empty
        """
        items = list(xs)
        if not items:
            raise EmptySequenceError("from_list requires a non-empty sequence")
        return cls._make(NIL, (items[0],), ConsList.from_iterable(items[1:]))

    @classmethod
    def from_lists(cls, left_part: Iterable[T], right_part: Iterable[T]) -> "Zipper[T]":
        """Return a zipper over ``left_part + right_part``.

        The cursor is the first element of ``right_part``.

        Raises:
            EmptySequenceError: If ``right_part`` is empty
        """
        right_items = list(right_part)
        if not right_items:
            raise EmptySequenceError("from_lists requires a non-empty right part")
        return cls._make(
            ConsList.from_reversed(left_part),
            (right_items[0],),
            ConsList.from_iterable(right_items[1:]),
        )

    @classmethod
    def from_list_end(cls, xs: Iterable[T]) -> "Zipper[T]":
        """Return a zipper over ``xs`` focused just past the last element."""
        return cls._make(ConsList.from_reversed(xs), (), NIL)

    # Fields

    @property
    def left(self) -> ConsList[T]:
        """Elements before the cursor, nearest first."""
        return self._left

    @property
    def right(self) -> ConsList[T]:
        """Elements after the cursor."""
        return self._right

    @property
    def has_cursor(self) -> bool:
        return bool(self._focus)

    @property
    def cursor(self) -> T:
        """The focused element.

        Raises:
            AbsentCursorError: If the focus is past the end or before the start
        """
        if not self._focus:
            raise AbsentCursorError("zipper has no cursor")
        return self._focus[0]

    def cursor_or(self, default: Any = None) -> Any:
        """Return the focused element, or ``default`` when it is absent."""
        return self._focus[0] if self._focus else default

    # Queries

    def to_list(self) -> List[T]:
        """Return all elements in logical order. O(n)."""
        items = list(self._left)
        items.reverse()
        items.extend(self._focus)
        items.extend(self._right)
        return items

    def is_at_start(self) -> bool:
        return not self._left

    def is_at_end(self) -> bool:
        return not self._focus and not self._right

    def is_empty(self) -> bool:
        return not self._left and not self._focus and not self._right

    def count(self) -> int:
        """Number of elements, cursor included. O(1)."""
        return len(self._left) + len(self._focus) + len(self._right)

    # Navigation

    def move_left(self) -> "Zipper[T]":
        """Shift the focus one element to the left.

        Returns the zipper unchanged when it is already at the start. An
        absent cursor contributes nothing to the right side.
        """
        left = self._left
        if not left:
            return self
        right = self._right.cons(self._focus[0]) if self._focus else self._right
        return self._make(left.tail, (left.head,), right)

    def move_right(self) -> "Zipper[T]":
        """Shift the focus one element to the right.

        Moving right from the last element leaves the cursor absent. At the
        end the zipper is returned unchanged.
        """
        right = self._right
        if not right:
            if not self._focus:
                return self
            return self._make(self._left.cons(self._focus[0]), (), right)
        left = self._left.cons(self._focus[0]) if self._focus else self._left
        return self._make(left, (right.head,), right.tail)

    def cursor_start(self) -> "Zipper[T]":
        """Move the focus to the first element. O(n) in the left side."""
        if not self._left and not self._right:
            return self
        full = self._right
        if self._focus:
            full = full.cons(self._focus[0])
        for item in self._left:
            full = full.cons(item)
        return self._make(NIL, (full.head,), full.tail)

    def cursor_end(self) -> "Zipper[T]":
        """Move the focus just past the last element. O(n) in the right side."""
        if not self._right:
            return self
        left = self._left
        if self._focus:
            left = left.cons(self._focus[0])
        for item in self._right:
            left = left.cons(item)
        return self._make(left, (), NIL)

    # Edits

    def insert(self, value: T) -> "Zipper[T]":
        """Insert ``value`` at the cursor, shifting the old cursor right."""
        if not self._focus:
            return self._make(self._left, (value,), self._right)
        return self._make(self._left, (value,), self._right.cons(self._focus[0]))

    def delete(self) -> "Zipper[T]":
        """Drop the cursor element; the next element to the right takes its place."""
        if not self._focus:
            return self
        right = self._right
        if not right:
            return self._make(self._left, (), right)
        return self._make(self._left, (right.head,), right.tail)

    def push(self, value: T) -> "Zipper[T]":
        """Insert ``value`` just before the cursor. The cursor is unchanged."""
        return self._make(self._left.cons(value), self._focus, self._right)

    def pop(self) -> "Zipper[T]":
        """Drop the element just before the cursor, if any."""
        if not self._left:
            return self
        return self._make(self._left.tail, self._focus, self._right)

    def replace(self, value: T) -> "Zipper[T]":
        """Set the cursor to ``value``, whether or not one was present."""
        return self._make(self._left, (value,), self._right)

    def safe_cursor(self, default: T) -> "Zipper[T]":
        """Fill an absent cursor with ``default``; otherwise return self."""
        if self._focus:
            return self
        return self._make(self._left, (default,), self._right)

    def reverse(self) -> "Zipper[T]":
        """Swap the left and right sides. O(1).

        The cursor value is kept. A cursor ``k`` elements from the start
        ends up ``k`` elements from the end.
        """
        return self._make(self._right, self._focus, self._left)

    # Sequence protocol

    def positions(self) -> Iterator["Zipper[T]"]:
        """Yield the zipper focused at each element from the cursor rightwards."""
        return iter(PositionTraverser(self))

    def __iter__(self) -> Iterator[T]:
        # Starts at the cursor, like every fold over a zipper.
        return iter(ValueTraverser(self))

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, value: object) -> bool:
        if self.is_empty():
            return False
        if self._focus and (self._focus[0] is value or self._focus[0] == value):
            return True
        return value in self._right or value in self._left

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zipper):
            return NotImplemented
        return (
            self._focus == other._focus
            and self._left == other._left
            and self._right == other._right
        )

    def __hash__(self) -> int:
        return hash((Zipper, self._left, self._focus, self._right))

    def __repr__(self) -> str:
        cursor = repr(self._focus[0]) if self._focus else "<absent>"
        return (
            f"{self.__class__.__name__}(left={list(self._left)!r}, "
            f"cursor={cursor}, right={list(self._right)!r})"
        )


def check_invariants(zipper: Zipper) -> Zipper:
    """Verify that ``zipper`` is in a state the operations can produce.

    An absent cursor is only valid when nothing is to its right.

    Returns:
        The zipper, so the check can be used inline

    Raises:
        InvariantViolationError: If the cursor is absent and the right
            side is not empty
    """
    if not zipper.has_cursor and zipper.right:
        logger.debug("Invariant fault: absent cursor with %d element(s) on the right", len(zipper.right))
        raise InvariantViolationError(
            f"absent cursor with non-empty right side: {zipper!r}"
        )
    return zipper
