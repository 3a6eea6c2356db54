"""Best-effort type inference for gathered value columns.

Gathering columns of different types into one value column often leaves
numbers stored as text. convert_column() re-types the whole column at once,
trying integer, then float, then boolean, and falling back to strings.
"""
import logging
import re

import pandas as pd

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r'^[+-]?\d+$')
INT64_MIN, INT64_MAX = -2 ** 63, 2 ** 63 - 1
TRUE_VALUES = {'TRUE', 'true', 'True', 'T'}
FALSE_VALUES = {'FALSE', 'false', 'False', 'F'}


def convert_column(series: pd.Series) -> pd.Series:
    """
    Convert a column using the first type that parses every non-missing value.

    Order: integer -> float -> boolean -> string. Missing values are kept;
    integer and boolean columns with missing values use the nullable
    'Int64' and 'boolean' dtypes.
    """
    mask = series.notna()
    if not mask.any():
        return series

    text = series[mask].map(_as_text)

    if text.map(_fits_int64).all():
        converted = pd.Series(pd.NA, index=series.index, dtype='Int64', name=series.name)
        converted[mask] = text.map(int).astype('Int64')
        logger.debug(f"Converted {series.name!r} to integer")
        return converted if not mask.all() else converted.astype('int64')

    floats = pd.to_numeric(text, errors='coerce')
    if floats.notna().all():
        converted = pd.Series(float('nan'), index=series.index, dtype='float64', name=series.name)
        converted[mask] = floats.astype('float64')
        logger.debug(f"Converted {series.name!r} to float")
        return converted

    if text.isin(TRUE_VALUES | FALSE_VALUES).all():
        converted = pd.Series(pd.NA, index=series.index, dtype='boolean', name=series.name)
        converted[mask] = text.isin(TRUE_VALUES)
        logger.debug(f"Converted {series.name!r} to boolean")
        return converted if not mask.all() else converted.astype(bool)

    # strings keep their original spacing
    converted = series.astype(object)
    converted[mask] = series[mask].map(str)
    return converted


def _fits_int64(text: str) -> bool:
    return bool(INTEGER_RE.match(text)) and INT64_MIN <= int(text) <= INT64_MAX


def _as_text(value) -> str:
    if isinstance(value, float) and value.is_integer():
        # 10.0 stays a float; only textual integers become integers
        return str(float(value))
    return str(value).strip()
