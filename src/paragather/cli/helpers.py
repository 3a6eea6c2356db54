"""
Shared utility functions for paragather CLI commands.
"""
from typing import Dict, Tuple

import pandas as pd
from rich.table import Table

from paragather.errors import ParallelGatherError


def parse_assignments(values: Tuple[str, ...], option: str) -> Dict[str, str]:
    """
    Parse repeated NAME=TEXT options into an ordered dict.

    e.g. ("value=Ca:V", "sd=*_sd") -> {"value": "Ca:V", "sd": "*_sd"}
    """
    result: Dict[str, str] = {}
    for item in values:
        name, sep, text = item.partition('=')
        name = name.strip()
        if not sep or not name:
            raise ParallelGatherError(f"{option} must look like NAME=VALUE, got {item!r}")
        if name in result:
            raise ParallelGatherError(f"{option} {name!r} given more than once")
        result[name] = text.strip()
    return result


def describe_selection(selection) -> str:
    """Render a group selection for display."""
    if isinstance(selection, (list, tuple)):
        return ', '.join(str(s) for s in selection)
    return str(selection)


def dataframe_table(df: pd.DataFrame, title: str, max_rows: int = 10) -> Table:
    """Build a Rich table showing the first max_rows rows of a DataFrame."""
    tbl = Table(title=title, header_style="table.header")
    for col in df.columns:
        justify = "right" if pd.api.types.is_numeric_dtype(df[col]) else "left"
        tbl.add_column(str(col), justify=justify)
    for row in df.head(max_rows).itertuples(index=False):
        tbl.add_row(*['' if pd.isna(v) else str(v) for v in row])
    if len(df) > max_rows:
        tbl.caption = f"{max_rows} of {len(df)} rows"
    return tbl
