"""Parallel gather - melt several groups of wide columns in lockstep.

Wide scientific tables often carry paired columns: a value column per
parameter plus matching uncertainty or flag columns (Ca, Ti, V next to
Ca_sd, Ti_sd, V_sd). parallel_gather() melts each group independently and
binds the results side by side, so every output row holds the value, the
uncertainty, and the flag for the same (identifiers, parameter) pair.

    >>> parallel_gather(pocmajsum, key='param',
    ...                 value=['Ca', 'Ti', 'V'], sd=['Ca_sd', 'Ti_sd', 'V_sd'])
         core  depth param  value  sd
    0   MAJ-1      1    Ca     10   1
    ...
"""
import logging
from typing import Dict, List, Mapping, Optional, Sequence

import pandas as pd

from ..errors import (
    AlignmentError,
    ColumnNameConflictError,
    ColumnNotFoundError,
    EmptyGroupsError,
    GroupSizeMismatchError,
    OverlappingGroupsError,
    UnnamedGroupError,
)
from .convert import convert_column
from .select import resolve_columns

logger = logging.getLogger(__name__)

_POSITION = '__member_position__'
_KEY = '__member_key__'
_VALUE = '__member_value__'


def gather(
    df: pd.DataFrame, key: str, value: str, columns: Sequence[str],
    convert: bool = False, factor_key: bool = False
) -> pd.DataFrame:
    """
    Melt columns into a key column and a value column (single group).

    Every column not in columns is kept as an identifier. Rows come out
    member-major: all source rows for columns[0], then all for columns[1], ...
    """
    columns = list(columns)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ColumnNotFoundError(missing[0])

    id_vars = [c for c in df.columns if c not in columns]
    _check_output_names(id_vars, key, [value])

    long_df = _melt_group(df, id_vars, key, value, columns, convert, factor_key)
    return long_df.drop(columns=_POSITION)


def parallel_gather(
    df: pd.DataFrame, key: str, groups: Optional[Mapping[str, object]] = None,
    convert: bool = False, factor_key: bool = False, **named_groups
) -> pd.DataFrame:
    """
    Melt multiple sets of columns in parallel.

    Groups are given as a mapping or as keyword arguments in the form
    new_col_name=selection. A selection is anything resolve_columns()
    accepts: a list of names, positions, helpers such as ends_with('_sd'),
    or the textual form 'Ca:V'. All groups must select the same number of
    columns.

    Args:
        df: Wide source table
        key: Name of the new column holding the first group's column names
        groups: Ordered mapping of output column name -> selection
        convert: Re-type each value column with convert_column()
        factor_key: Make the key column categorical, ordered as the first
            group's columns
        **named_groups: Groups given as keyword arguments (after groups)

    Returns:
        A new DataFrame with identifier columns, key, then one column per group.
    """
    all_groups: Dict[str, object] = dict(groups or {})
    for name, selection in named_groups.items():
        if name in all_groups:
            raise UnnamedGroupError(f"Group name given twice: {name!r}")
        all_groups[name] = selection

    if not all_groups:
        raise EmptyGroupsError()
    _check_group_names(list(all_groups))

    available = list(df.columns)
    resolved = {
        name: resolve_columns(selection, available)
        for name, selection in all_groups.items()
    }
    return parallel_gather_base(df, key, resolved, convert=convert, factor_key=factor_key)


def parallel_gather_base(
    df: pd.DataFrame, key: str, groups: Mapping[str, Sequence[str]],
    convert: bool = False, factor_key: bool = False
) -> pd.DataFrame:
    """
    Melt groups of already-resolved column names in parallel.

    All validation happens before any reshaping; see parallel_gather().
    """
    if not groups:
        raise EmptyGroupsError()

    names = list(groups)
    _check_group_names(names)

    members = {name: list(groups[name]) for name in names}
    sizes = {name: len(cols) for name, cols in members.items()}
    if len(set(sizes.values())) != 1:
        raise GroupSizeMismatchError(sizes)

    for cols in members.values():
        for col in cols:
            if col not in df.columns:
                raise ColumnNotFoundError(col)

    seen: Dict[str, str] = {}
    for name, cols in members.items():
        for col in cols:
            if col in seen:
                raise OverlappingGroupsError(
                    f"Column {col!r} is used by both {seen[col]!r} and {name!r}"
                    if seen[col] != name else
                    f"Column {col!r} is used twice in {name!r}"
                )
            seen[col] = name

    # id variables are those not mentioned in any group
    id_vars = [c for c in df.columns if c not in seen]
    _check_output_names(id_vars, key, names)

    logger.debug(
        f"Gathering {len(names)} group(s) of {sizes[names[0]]} column(s) "
        f"over {len(df)} row(s); identifiers: {id_vars}"
    )

    gathered = [
        _melt_group(df, id_vars, key, name, members[name], convert, factor_key)
        for name in names
    ]

    id_data = gathered[0][id_vars + [key]]
    reference = gathered[0][id_vars + [_POSITION]]
    for name, long_df in zip(names[1:], gathered[1:]):
        _check_alignment(reference, long_df[id_vars + [_POSITION]], names[0], name)

    values = [long_df[[name]] for name, long_df in zip(names, gathered)]
    result = pd.concat([id_data] + values, axis=1)

    logger.debug(f"Gathered shape {df.shape} -> {result.shape}")
    return result


def _melt_group(
    df: pd.DataFrame, id_vars: List[str], key: str, value: str,
    columns: List[str], convert: bool, factor_key: bool
) -> pd.DataFrame:
    """Melt one group, tagging each row with the position of its source column."""
    positions = {col: i for i, col in enumerate(columns)}

    if columns:
        # melt refuses a value_name that is still a source column name
        long_df = pd.melt(df, id_vars=id_vars, value_vars=columns,
                          var_name=_KEY, value_name=_VALUE)
        long_df = long_df.rename(columns={_KEY: key, _VALUE: value})
        long_df[key] = long_df[key].astype(object)
    else:
        long_df = pd.DataFrame({
            **{c: df[c].iloc[:0] for c in id_vars},
            key: pd.Series([], dtype=object),
            value: pd.Series([], dtype=object),
        })
    long_df = long_df.reset_index(drop=True)
    long_df[_POSITION] = long_df[key].map(positions)

    if convert:
        long_df[value] = convert_column(long_df[value])

    if factor_key:
        long_df[key] = pd.Categorical(long_df[key], categories=columns)

    return long_df


def _check_alignment(reference: pd.DataFrame, other: pd.DataFrame, first: str, name: str) -> None:
    """Verify a group's rows describe the same (identifiers, position) as the first group."""
    if len(reference) != len(other):
        raise AlignmentError(
            f"Group {name!r} has {len(other)} rows but {first!r} has {len(reference)}"
        )
    if not reference.reset_index(drop=True).equals(other.reset_index(drop=True)):
        raise AlignmentError(f"Rows of group {name!r} do not line up with group {first!r}")


def _check_group_names(names: List) -> None:
    for name in names:
        if not isinstance(name, str) or not name:
            raise UnnamedGroupError("All arguments to parallel_gather() must be named")
    if len(set(names)) != len(names):
        raise UnnamedGroupError(f"Group names must be unique: {names}")


def _check_output_names(id_vars: List[str], key: str, names: List[str]) -> None:
    if not isinstance(key, str) or not key:
        raise ColumnNameConflictError("Key column name must be a non-empty string")
    output = list(id_vars) + [key] + list(names)
    dupes = sorted({str(c) for c in output if output.count(c) > 1})
    if dupes:
        raise ColumnNameConflictError(f"Output column names would be duplicated: {dupes}")
    reserved = sorted({_POSITION, _KEY, _VALUE} & set(output))
    if reserved:
        raise ColumnNameConflictError(f"Column names are reserved: {reserved}")
