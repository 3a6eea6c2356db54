"""
Gather command - melt paired column groups of a wide table into long form.

Groups come from --group NAME=SELECTION options, a saved config, or both
(options win). The result is written as CSV or previewed in the terminal.
"""
import logging
from typing import Optional, Tuple

import click
import requests

from paragather.cli.console import console
from paragather.cli.helpers import dataframe_table, describe_selection, parse_assignments
from paragather.errors import ParallelGatherError
from paragather.loader import read_table, write_table
from paragather.pipeline import GatherConfig, load_config
from paragather.transform import parallel_gather

logger = logging.getLogger(__name__)


@click.command('gather')
@click.argument('source')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='CSV file to write (preview only if omitted)')
@click.option('--key', '-k', help='Name of the key column (default from config or "param")')
@click.option('--group', '-g', 'groups', multiple=True, help='Column group as NAME=SELECTION, e.g. value=Ca:V')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False), help='Saved gather config (JSON)')
@click.option('--sheet', help='Excel sheet to read')
@click.option('--convert', is_flag=True, help='Re-type value columns after gathering')
@click.option('--factor-key', is_flag=True, help='Make the key column categorical')
@click.option('--preview', default=10, show_default=True, help='Rows to show when previewing')
def gather_command(source: str, output: Optional[str], key: Optional[str], groups: Tuple[str, ...],
                   config_path: Optional[str], sheet: Optional[str], convert: bool,
                   factor_key: bool, preview: int):
    """Gather column groups of SOURCE (CSV, Excel, or URL) in parallel."""
    try:
        config = _build_config(config_path, key, groups, sheet, convert, factor_key)
        if not config.groups:
            raise ParallelGatherError("No column groups given - use --group NAME=SELECTION or --config")

        with console.status(f"Reading {source}..."):
            df = read_table(source, sheet_name=config.sheet_name)

        console.print(f"[info]Read[/] [count]{len(df)}[/] rows x [count]{len(df.columns)}[/] columns")
        for name, selection in config.groups.items():
            console.print(f"  [highlight]{name}[/] = {describe_selection(selection)}")

        result = parallel_gather(df, config.key, config.groups,
                                 convert=config.convert, factor_key=config.factor_key)
        if output:
            path = write_table(result, output)
    except (ParallelGatherError, ValueError, KeyError, OSError, requests.RequestException) as e:
        logger.debug("gather failed", exc_info=True)
        console.print(f"[error]{e}[/]")
        raise SystemExit(1)

    if output:
        console.print(f"[success]Wrote {len(result)} rows to {path}[/]")
    else:
        console.print(dataframe_table(result, title=f"Gathered by '{config.key}'", max_rows=preview))


def _build_config(config_path: Optional[str], key: Optional[str], groups: Tuple[str, ...],
                  sheet: Optional[str], convert: bool,
                  factor_key: bool) -> GatherConfig:
    """Merge a saved config with command line overrides."""
    config = load_config(config_path) if config_path else GatherConfig()

    for name, selection in parse_assignments(groups, '--group').items():
        config.set_group(name, selection)
    if key:
        config.key = key
    if sheet:
        config.sheet_name = sheet
    if convert:
        config.convert = True
    if factor_key:
        config.factor_key = True
    return config
