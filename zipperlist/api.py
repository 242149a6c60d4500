"""High-level API for zipperlist.

Functional wrappers around the Zipper type, the fold protocol and the
collectors, for the common cases where building a FoldPlan by hand would
be noise.

Fold-based functions accept these keyword options:

    origin           - "cursor" (default) or "start", or a FoldOrigin
    check_invariants - verify every visited position (default False)
"""

from typing import Any, Callable, Iterable, List, Optional, Union

from .config import FoldConfig, FoldOrigin
from .core.collector import (
    CustomCollector,
    FindCollector,
    FoldCollector,
    MapCollector,
    ValueCollector,
)
from .core.traverser import FoldResult, StepFunction
from .core.zipper import Zipper
from .planning import FoldPlan


def fold(zipper: Zipper, acc: Any, step: StepFunction, **kwargs) -> FoldResult:
    """Fold ``step`` over ``zipper``, returning the raw fold result.

    Unlike ``collect``, a suspension is handed back to the caller as a
    ``Suspended`` result carrying its continuation.

    Args:
        zipper: Zipper to fold over
        acc: Starting accumulator
        step: Function ``(position, acc) -> (directive, acc)``
        **kwargs: Fold options (see module docstring)

    Returns:
        ``Done``, ``Halted`` or ``Suspended``

    Example:
        >>> z = Zipper.from_lists([1], [2, 3, 4, 5])
        >>> result = fold(z, 0, lambda p, acc: ("halt", acc) if p.cursor == 4 else ("continue", acc + p.cursor))
        >>> result
        Halted(acc=5)
    """
    plan = FoldPlan(_build_config_from_kwargs(**kwargs), CustomCollector(step, acc))
    return plan.start(zipper)


def collect(zipper: Zipper, collector: FoldCollector, **kwargs) -> Any:
    """Run ``collector`` over ``zipper`` to completion.

    Args:
        zipper: Zipper to fold over
        collector: Consumer to run
        **kwargs: Fold options (see module docstring)

    Returns:
        Whatever the collector's ``finish`` produces
    """
    plan = FoldPlan(_build_config_from_kwargs(**kwargs), collector)
    return plan.execute(zipper)


def count(zipper: Zipper) -> int:
    """Number of elements in the whole zipper, cursor included."""
    return zipper.count()


def member(zipper: Zipper, value: Any) -> bool:
    """Check whether ``value`` is anywhere in the zipper.

    Looks at the cursor, then the right side, then the left side. This is
    a whole-zipper query and ignores where the cursor is.
    """
    return value in zipper


def find(zipper: Zipper, predicate: Callable[[Zipper], bool], **kwargs) -> Optional[Zipper]:
    """Find the first position, from the cursor on, matching ``predicate``.

    Args:
        zipper: Zipper to search
        predicate: Function called with the zipper focused at each element
        **kwargs: Fold options (see module docstring)

    Returns:
        The zipper focused at the match, or None

    Example:
        >>> z = Zipper.from_lists([1], [2, 3, 4, 5])
        >>> find(z, lambda p: p.cursor == 4)
        Zipper(left=[3, 2, 1], cursor=4, right=[5])
    """
    return collect(zipper, FindCollector(predicate), **kwargs)


def to_values(zipper: Zipper, **kwargs) -> List[Any]:
    """Return the elements from the fold origin to the end as a list."""
    return collect(zipper, ValueCollector(), **kwargs)


def map_cursor(zipper: Zipper, fn: Callable[[Any], Any], **kwargs) -> List[Any]:
    """Apply ``fn`` to each element from the fold origin to the end.

    Example:
        >>> z = Zipper.from_lists([1, 2, 3], [4, 5, 6])
        >>> map_cursor(z, lambda x: x * 3)
        [12, 15, 18]
        >>> map_cursor(z, lambda x: x * 3, origin="start")
        [3, 6, 9, 12, 15, 18]
    """
    return collect(zipper, MapCollector(lambda position: fn(position.cursor)), **kwargs)


def into(values: Iterable[Any], zipper: Optional[Zipper] = None) -> Zipper:
    """Insert each of ``values`` at the cursor and step past it.

    Starting from an empty zipper the result holds ``values`` in order with
    the focus past the end.

    Args:
        values: Values to add, in arrival order
        zipper: Zipper to add to (default: a new empty zipper)

    Returns:
        The zipper after all insertions

    Example:
        >>> into(x * 2 for x in [1, 2, 3])
        Zipper(left=[6, 4, 2], cursor=<absent>, right=[])
    """
    result = Zipper.empty() if zipper is None else zipper
    for value in values:
        result = result.insert(value).move_right()
    return result


def from_iterable(values: Iterable[Any]) -> Zipper:
    """Return a zipper focused on the first of ``values``.

    Unlike ``Zipper.from_list``, an empty input gives an empty zipper.
    """
    items = list(values)
    if not items:
        return Zipper.empty()
    return Zipper.from_list(items)


def _parse_origin(origin: Union[FoldOrigin, str]) -> FoldOrigin:
    """Parse origin from string or enum.

    Args:
        origin: Origin as enum or string

    Returns:
        FoldOrigin enum value
    """
    if isinstance(origin, FoldOrigin):
        return origin

    origin_map = {
        'cursor': FoldOrigin.CURSOR,
        'start': FoldOrigin.START,
    }

    origin_lower = origin.lower() if isinstance(origin, str) else str(origin)
    if origin_lower in origin_map:
        return origin_map[origin_lower]

    raise ValueError(f"Unknown fold origin: {origin}")


def _build_config_from_kwargs(**kwargs) -> FoldConfig:
    """Build FoldConfig from keyword arguments.

    Raises:
        TypeError: For an option FoldConfig does not have
    """
    config = FoldConfig()

    if 'origin' in kwargs:
        config.origin = _parse_origin(kwargs.pop('origin'))

    if 'check_invariants' in kwargs:
        config.check_invariants = kwargs.pop('check_invariants')

    if kwargs:
        raise TypeError(f"Unknown fold option(s): {', '.join(sorted(kwargs))}")

    return config
