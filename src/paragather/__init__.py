"""paragather - melt paired column groups of wide scientific tables in parallel."""
from .errors import (
    ParallelGatherError,
    EmptyGroupsError,
    UnnamedGroupError,
    GroupSizeMismatchError,
    ColumnNotFoundError,
    OverlappingGroupsError,
    ColumnNameConflictError,
    AlignmentError,
)
from .transform import (
    gather,
    parallel_gather,
    parallel_gather_base,
    resolve_columns,
    starts_with,
    ends_with,
    contains,
    matches,
    col_range,
    everything,
    convert_column,
    detect_paired_groups,
    detect_and_gather,
)

__version__ = '0.1.0'
