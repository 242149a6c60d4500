"""Persistent singly linked list for zipperlist.

A ConsList is the storage behind both sides of a Zipper. Prepending and
dropping the head are O(1) and share the tail with the original list, so
every zipper operation can hand back a new value without copying.
"""

from typing import Any, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class ConsList(Generic[T]):
    """Immutable cons list with a cached length.

    Cells are never modified after construction. Equality, hashing and
    iteration walk the cells in a loop rather than recursing, so long
    lists stay well clear of the interpreter's recursion limit.
    """

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self) -> None:
        # Always empty; cells are built by cons().
        object.__setattr__(self, "_head", None)
        object.__setattr__(self, "_tail", None)
        object.__setattr__(self, "_size", 0)

    @classmethod
    def _cell(cls, head: T, tail: "ConsList[T]") -> "ConsList[T]":
        cell = object.__new__(cls)
        object.__setattr__(cell, "_head", head)
        object.__setattr__(cell, "_tail", tail)
        object.__setattr__(cell, "_size", tail._size + 1)
        return cell

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    # Construction

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "ConsList[T]":
        """Build a list holding ``items`` in the same order."""
        buffered = list(items)
        result: ConsList[T] = NIL
        for item in reversed(buffered):
            result = result.cons(item)
        return result

    @classmethod
    def from_reversed(cls, items: Iterable[T]) -> "ConsList[T]":
        """Build a list holding ``items`` in reverse order. Single pass."""
        result: ConsList[T] = NIL
        for item in items:
            result = result.cons(item)
        return result

    def cons(self, head: T) -> "ConsList[T]":
        """Return a new list with ``head`` in front of this one. O(1)."""
        return ConsList._cell(head, self)

    # Access

    @property
    def head(self) -> T:
        if self._size == 0:
            raise IndexError("head of empty ConsList")
        return self._head

    @property
    def tail(self) -> "ConsList[T]":
        if self._size == 0:
            raise IndexError("tail of empty ConsList")
        return self._tail

    def is_empty(self) -> bool:
        return self._size == 0

    def reversed(self) -> "ConsList[T]":
        return ConsList.from_reversed(self)

    def to_list(self) -> List[T]:
        return list(self)

    # Python protocols

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[T]:
        cell = self
        while cell._size:
            yield cell._head
            cell = cell._tail

    def __contains__(self, value: object) -> bool:
        for item in self:
            if item is value or item == value:
                return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConsList):
            return NotImplemented
        if self._size != other._size:
            return False
        a, b = self, other
        while a._size:
            if a is b:
                # Shared tail, the rest is identical.
                return True
            if not (a._head is b._head or a._head == b._head):
                return False
            a, b = a._tail, b._tail
        return True

    def __hash__(self) -> int:
        return hash((ConsList, tuple(self)))

    def __repr__(self) -> str:
        return f"ConsList({list(self)!r})"


NIL: ConsList[Any] = ConsList()
