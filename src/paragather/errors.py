"""Error taxonomy for parallel gather operations.

All errors are usage errors raised before (or instead of) returning a table.
Nothing is recovered internally.
"""
from typing import Dict, Optional


class ParallelGatherError(ValueError):
    """Base class for all parallel gather usage errors."""


class EmptyGroupsError(ParallelGatherError):
    """No column groups were supplied."""

    def __init__(self, message: str = "Must pass at least one value = columns in parallel_gather()"):
        super().__init__(message)


class UnnamedGroupError(ParallelGatherError):
    """A group name is empty, missing, not a string, or duplicated."""


class GroupSizeMismatchError(ParallelGatherError):
    """Groups refer to different numbers of columns."""

    def __init__(self, sizes: Dict[str, int]):
        self.sizes = dict(sizes)
        detail = ', '.join(f"{name}={count}" for name, count in self.sizes.items())
        super().__init__(f"All named arguments must refer to the same number of columns ({detail})")


class ColumnNotFoundError(ParallelGatherError, KeyError):
    """A selection or literal column name does not exist in the source table."""

    def __init__(self, column, message: Optional[str] = None):
        self.column = column
        super().__init__(message or f"Column not found: {column!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class OverlappingGroupsError(ParallelGatherError):
    """A source column is referenced more than once across all groups."""


class ColumnNameConflictError(ParallelGatherError):
    """The key name or a group name collides with another output column."""


class AlignmentError(ParallelGatherError):
    """Independently gathered groups do not line up row-for-row."""
