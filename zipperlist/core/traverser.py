"""Resumable fold protocol for zipperlist.

Folding walks a zipper from its cursor to the end, one position at a time.
The step function receives the zipper focused at the current element
together with the accumulator, and answers with a directive:

    CONTINUE - keep the new accumulator and advance one position
    SUSPEND  - stop here and hand back a continuation for the rest
    HALT     - stop for good

Only ``move_right``, ``is_at_end`` and ``has_cursor`` drive the walk, so
this module does not depend on how the zipper is stored. A reversed zipper
whose focus sits before the start is walked from its first element.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterator, Tuple, Union

if TYPE_CHECKING:
    from .zipper import Zipper


class Directive(Enum):
    """What a fold should do after a step."""
    CONTINUE = "continue"
    SUSPEND = "suspend"
    HALT = "halt"


Command = Tuple[Union[Directive, str], Any]
StepFunction = Callable[["Zipper", Any], Command]


@dataclass(frozen=True)
class Done:
    """The fold reached the end of the zipper."""
    acc: Any


@dataclass(frozen=True)
class Halted:
    """The fold was cancelled by a HALT directive."""
    acc: Any


@dataclass(frozen=True)
class Suspended:
    """The fold paused; ``continuation`` picks up where it stopped."""
    acc: Any
    continuation: "Continuation"


FoldResult = Union[Done, Halted, Suspended]


class Continuation:
    """The remainder of a suspended fold.

    Holds the position to resume from and the step function. Nothing is
    consumed by resuming, so the same continuation can be called any
    number of times and each call replays the same remaining walk.
    """

    __slots__ = ("_position", "_step")

    def __init__(self, position: "Zipper", step: StepFunction):
        self._position = position
        self._step = step

    @property
    def position(self) -> "Zipper":
        """Zipper focused at the first element not yet passed to the step."""
        return self._position

    def __call__(self, command: Command) -> FoldResult:
        return fold(self._position, command, self._step)

    def resume(self, acc: Any, directive: Union[Directive, str] = Directive.CONTINUE) -> FoldResult:
        """Resume with ``acc``, continuing by default."""
        return fold(self._position, (directive, acc), self._step)

    def __repr__(self) -> str:
        return f"Continuation(position={self._position!r})"


def _unpack(command: Command) -> Tuple[Directive, Any]:
    try:
        directive, acc = command
    except (TypeError, ValueError):
        raise TypeError(
            f"fold command must be a (directive, accumulator) pair, got {command!r}"
        ) from None
    return Directive(directive), acc


def fold(zipper: "Zipper", command: Command, step: StepFunction) -> FoldResult:
    """Fold ``step`` over ``zipper`` from the cursor to the end.

    The walk starts at the current cursor, not at the first element; call
    ``cursor_start()`` first to cover the whole list.

    Args:
        zipper: Zipper to fold over
        command: Initial ``(directive, accumulator)`` pair
        step: Function ``(position, acc) -> (directive, acc)``

    Returns:
        ``Halted`` if a HALT directive was seen, ``Done`` once the end is
        reached, otherwise ``Suspended``.

    Example:
        >>> z = Zipper.from_lists([1, 2, 3], [4, 5])
        >>> fold(z, (Directive.CONTINUE, 0), lambda p, acc: (Directive.CONTINUE, acc + p.cursor))
        Done(acc=9)
    """
    directive, acc = _unpack(command)
    position = zipper
    while True:
        if directive is Directive.HALT:
            return Halted(acc)
        if position.is_at_end():
            return Done(acc)
        if not position.has_cursor:
            # Before the start of a reversed zipper; this slot holds no element.
            position = position.move_right()
            continue
        if directive is Directive.SUSPEND:
            return Suspended(acc, Continuation(position, step))
        directive, acc = _unpack(step(position, acc))
        position = position.move_right()


def _suspend_each(position: "Zipper", acc: Any) -> Command:
    return (Directive.SUSPEND, position)


class ZipperTraverser(ABC):
    """Lazy iteration over a zipper, driven by the fold protocol.

    Each element is visited by a step that suspends immediately, so the
    walk only advances when the next item is requested.
    """

    def __init__(self, zipper: "Zipper"):
        self.zipper = zipper

    @abstractmethod
    def project(self, position: "Zipper") -> Any:
        """Turn a visited position into the item to yield."""
        pass

    def traverse(self) -> Iterator[Any]:
        from .zipper import Zipper

        result = fold(self.zipper, (Directive.CONTINUE, None), _suspend_each)
        while isinstance(result, Suspended):
            yield self.project(result.acc)
            result = result.continuation((Directive.CONTINUE, None))
        # The last element's suspension lands on the end, which reports Done.
        if isinstance(result, Done) and isinstance(result.acc, Zipper):
            yield self.project(result.acc)

    def __iter__(self) -> Iterator[Any]:
        return self.traverse()


class PositionTraverser(ZipperTraverser):
    """Yields the zipper focused at each element."""

    def project(self, position: "Zipper") -> "Zipper":
        return position


class ValueTraverser(ZipperTraverser):
    """Yields the element at each position."""

    def project(self, position: "Zipper") -> Any:
        return position.cursor
