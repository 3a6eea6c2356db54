"""Detect paired column groups (Ca + Ca_sd, ...) and gather them automatically."""
import logging
from typing import Dict, List, Mapping, Sequence, Tuple

import pandas as pd

from .parallel import parallel_gather_base

logger = logging.getLogger(__name__)


def detect_paired_groups(
    columns: Sequence[str], suffixes: Mapping[str, str],
    value_name: str = 'value', min_params: int = 1
) -> Dict[str, List[str]]:
    """
    Find parameter columns that have a companion column for every suffix.

    Example: columns [core, depth, Ca, Ti, Ca_sd, Ti_sd] with {'sd': '_sd'}
    -> {'value': ['Ca', 'Ti'], 'sd': ['Ca_sd', 'Ti_sd']}

    Returns an empty dict when fewer than min_params parameters are found.
    """
    if not suffixes:
        return {}

    names = [str(c) for c in columns]
    present = set(names)
    companions = set()
    params = []

    for col in names:
        if col in companions:
            continue
        paired = [col + suffix for suffix in suffixes.values()]
        if all(p in present for p in paired):
            params.append(col)
            companions.update(paired)

    # a companion can't also be a parameter (Ca_sd_sd is not a thing)
    params = [p for p in params if p not in companions]

    if len(params) < max(min_params, 1):
        logger.debug(f"Paired detection found {len(params)} parameter(s), need {min_params}")
        return {}

    groups = {value_name: params}
    for name, suffix in suffixes.items():
        groups[name] = [p + suffix for p in params]
    return groups


def detect_and_gather(
    df: pd.DataFrame, suffixes: Mapping[str, str], key: str = 'param',
    value_name: str = 'value', min_params: int = 1,
    convert: bool = False, factor_key: bool = False
) -> Tuple[pd.DataFrame, dict]:
    """Auto-detect paired columns and gather them if found."""
    groups = detect_paired_groups(df.columns.tolist(), suffixes, value_name, min_params)

    metadata = {
        'transformed': False, 'groups': groups, 'identifiers': df.columns.tolist(),
        'original_shape': df.shape, 'final_shape': df.shape
    }
    if not groups:
        return df, metadata

    used = {c for cols in groups.values() for c in cols}
    df_long = parallel_gather_base(df, key, groups, convert=convert, factor_key=factor_key)
    metadata['transformed'] = True
    metadata['identifiers'] = [c for c in df.columns if c not in used]
    metadata['final_shape'] = df_long.shape
    return df_long, metadata
