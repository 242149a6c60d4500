"""Fold consumers for zipperlist.

A FoldCollector packages a step function with its starting accumulator and
a final conversion, so common folds (counting, searching, gathering values)
are written once against the fold protocol and reused for any zipper.

Accumulators are kept immutable. A suspended fold can then be resumed more
than once without the branches seeing each other's results.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Tuple

from .conslist import NIL, ConsList
from .traverser import Directive
from .zipper import Zipper


class FoldCollector(ABC):
    """Abstract base class for fold consumers.

    Subclasses implement ``step``; ``initial`` and ``finish`` default to
    ``None`` and the identity.
    """

    def initial(self) -> Any:
        """Return the starting accumulator."""
        return None

    @abstractmethod
    def step(self, position: Zipper, acc: Any) -> Tuple[Directive, Any]:
        """Process one position.

        Args:
            position: Zipper focused at the current element
            acc: Accumulator so far

        Returns:
            ``(directive, new_acc)``
        """
        pass

    def finish(self, acc: Any) -> Any:
        """Convert the final accumulator into the collector's result."""
        return acc


class CountCollector(FoldCollector):
    """Counts positions visited."""

    def initial(self) -> int:
        return 0

    def step(self, position: Zipper, acc: int) -> Tuple[Directive, int]:
        return Directive.CONTINUE, acc + 1


class MapCollector(FoldCollector):
    """Applies ``fn`` to each position and gathers the results in order."""

    def __init__(self, fn: Callable[[Zipper], Any]):
        self.fn = fn

    def initial(self) -> ConsList:
        return NIL

    def step(self, position: Zipper, acc: ConsList) -> Tuple[Directive, ConsList]:
        return Directive.CONTINUE, acc.cons(self.fn(position))

    def finish(self, acc: ConsList) -> List[Any]:
        return list(acc.reversed())


class ValueCollector(MapCollector):
    """Gathers the element at each position."""

    def __init__(self):
        super().__init__(lambda position: position.cursor)


class SumCollector(FoldCollector):
    """Sums elements, or ``key(element)`` when a key is given."""

    def __init__(self, key: Optional[Callable[[Any], Any]] = None):
        self.key = key

    def initial(self) -> Any:
        return 0

    def step(self, position: Zipper, acc: Any) -> Tuple[Directive, Any]:
        value = position.cursor
        if self.key is not None:
            value = self.key(value)
        return Directive.CONTINUE, acc + value


class FindCollector(FoldCollector):
    """Stops at the first position matching ``predicate``.

    The result is that position, or ``None`` if nothing matched.
    """

    def __init__(self, predicate: Callable[[Zipper], bool]):
        self.predicate = predicate

    def step(self, position: Zipper, acc: Any) -> Tuple[Directive, Any]:
        if self.predicate(position):
            return Directive.HALT, position
        return Directive.CONTINUE, None


class CustomCollector(FoldCollector):
    """Collector built from plain functions.

    Args:
        step_fn: Function ``(position, acc) -> (directive, acc)``
        initial: Starting accumulator
        finish_fn: Optional conversion of the final accumulator
    """

    def __init__(self,
                 step_fn: Callable[[Zipper, Any], Tuple[Any, Any]],
                 initial: Any = None,
                 finish_fn: Optional[Callable[[Any], Any]] = None):
        self.step_fn = step_fn
        self._initial = initial
        self.finish_fn = finish_fn

    def initial(self) -> Any:
        return self._initial

    def step(self, position: Zipper, acc: Any) -> Tuple[Any, Any]:
        return self.step_fn(position, acc)

    def finish(self, acc: Any) -> Any:
        if self.finish_fn is None:
            return acc
        return self.finish_fn(acc)
