"""Execution planning for zipperlist folds.

A FoldPlan validates a FoldConfig, positions the zipper at the configured
origin and runs a FoldCollector over it.
"""

import logging
from typing import Any, Dict

from .config import FoldConfig, FoldOrigin
from .core.collector import FoldCollector
from .core.errors import FoldConfigError
from .core.traverser import Directive, FoldResult, Halted, Suspended, fold
from .core.zipper import Zipper, check_invariants

logger = logging.getLogger(__name__)


class FoldPlan:
    """Validated plan for folding a collector over zippers.

    The plan can be executed against any number of zippers. ``start``
    returns the raw fold result, leaving suspensions to the caller;
    ``execute`` resumes through them and returns the collector's result.
    """

    def __init__(self, config: FoldConfig, collector: FoldCollector):
        """Create and validate a fold plan.

        Args:
            config: Fold configuration
            collector: Consumer to run

        Raises:
            FoldConfigError: If the configuration is invalid
        """
        config_errors = config.validate()
        if config_errors:
            raise FoldConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.config = config
        self.collector = collector

        # Track execution state
        self.positions_visited = 0

    def prepare(self, zipper: Zipper) -> Zipper:
        """Return ``zipper`` moved to the configured origin."""
        if self.config.check_invariants:
            check_invariants(zipper)
        if self.config.origin == FoldOrigin.START:
            return zipper.cursor_start()
        return zipper

    def _step(self, position: Zipper, acc: Any):
        self.positions_visited += 1
        if self.config.check_invariants:
            check_invariants(position)
        return self.collector.step(position, acc)

    def start(self, zipper: Zipper) -> FoldResult:
        """Begin the fold and return the first result, suspended or not."""
        self.positions_visited = 0
        return fold(
            self.prepare(zipper),
            (Directive.CONTINUE, self.collector.initial()),
            self._step,
        )

    def execute(self, zipper: Zipper) -> Any:
        """Run the fold to completion and return the collector's result.

        A collector that suspends is resumed with the accumulator it
        suspended with. A halt ends the fold early.
        """
        result = self.start(zipper)
        while isinstance(result, Suspended):
            logger.debug("Fold suspended after %d position(s); resuming", self.positions_visited)
            result = result.continuation.resume(result.acc)

        if isinstance(result, Halted):
            logger.debug("Fold halted after %d position(s)", self.positions_visited)
        else:
            logger.debug("Fold done after %d position(s)", self.positions_visited)

        return self.collector.finish(result.acc)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the plan, useful for debugging and logging."""
        return {
            'origin': self.config.origin.value,
            'check_invariants': self.config.check_invariants,
            'collector': self.collector.__class__.__name__,
            'positions_visited': self.positions_visited,
        }
