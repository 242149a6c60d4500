"""Configuration for folds in zipperlist.

A FoldConfig says where a fold starts and whether visited zippers are
checked for internal consistency. It is passed explicitly; the library
keeps no global settings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class FoldOrigin(Enum):
    """Where a fold starts."""
    CURSOR = "cursor"   # At the current cursor (protocol default)
    START = "start"     # At the first element, via cursor_start()


@dataclass
class FoldConfig:
    """Options for running a collector over a zipper."""

    origin: FoldOrigin = FoldOrigin.CURSOR

    # Run check_invariants() on the input and on every visited position
    check_invariants: bool = False

    @classmethod
    def whole_sequence(cls) -> 'FoldConfig':
        """Config for folding over every element regardless of the cursor."""
        return cls(origin=FoldOrigin.START)

    @classmethod
    def debug(cls) -> 'FoldConfig':
        """Config that checks invariants at every step."""
        return cls(check_invariants=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.origin, FoldOrigin):
            errors.append(f"origin must be a FoldOrigin, got {self.origin!r}")

        if not isinstance(self.check_invariants, bool):
            errors.append("check_invariants must be a bool")

        return errors
