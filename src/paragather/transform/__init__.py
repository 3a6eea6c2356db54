"""Transform module for parallel gathering of wide column groups.

Functions for resolving column selections, melting groups in lockstep,
and re-typing gathered values.
"""
from .parallel import (
    gather,
    parallel_gather,
    parallel_gather_base,
)
from .select import (
    Selector,
    col_range,
    contains,
    ends_with,
    everything,
    glob,
    matches,
    parse_selection,
    resolve_columns,
    starts_with,
)
from .convert import convert_column
from .detect import detect_paired_groups, detect_and_gather

__all__ = [
    'gather',
    'parallel_gather',
    'parallel_gather_base',
    'Selector',
    'col_range',
    'contains',
    'ends_with',
    'everything',
    'glob',
    'matches',
    'parse_selection',
    'resolve_columns',
    'starts_with',
    'convert_column',
    'detect_paired_groups',
    'detect_and_gather',
]
