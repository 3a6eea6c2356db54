"""
Detect command - find paired value/companion columns in a wide table.

Shows which parameters have a column for every suffix (Ca + Ca_sd + Ca_flag)
and can save the result as a gather config for the gather command.
"""
from typing import Optional, Tuple

import click
import requests
from rich.table import Table

from paragather.cli.console import console
from paragather.cli.helpers import parse_assignments
from paragather.errors import ParallelGatherError
from paragather.loader import get_sheet_names, is_url, read_table
from paragather.pipeline import GatherConfig, save_config
from paragather.transform import detect_paired_groups


@click.command('detect')
@click.argument('source')
@click.option('--suffix', '-s', 'suffixes', multiple=True, help='Companion group as NAME=SUFFIX (default sd=_sd)')
@click.option('--key', '-k', help='Key column name for the saved config')
@click.option('--value-name', default='value', show_default=True, help='Name of the main value group')
@click.option('--sheet', help='Excel sheet to read')
@click.option('--save-config', 'save_path', type=click.Path(dir_okay=False), help='Write detected groups as a gather config')
def detect_command(source: str, suffixes: Tuple[str, ...], key: Optional[str], value_name: str,
                   sheet: Optional[str], save_path: Optional[str]):
    """Detect paired column groups in SOURCE."""
    try:
        suffix_map = parse_assignments(suffixes, '--suffix') if suffixes else {'sd': '_sd'}
        if not is_url(source) and source.lower().endswith(('.xlsx', '.xls')):
            console.print(f"[muted]Sheets: {', '.join(get_sheet_names(source))}[/]")
        df = read_table(source, sheet_name=sheet)
    except (ParallelGatherError, ValueError, OSError, requests.RequestException) as e:
        console.print(f"[error]{e}[/]")
        raise SystemExit(1)

    groups = detect_paired_groups(df.columns.tolist(), suffix_map, value_name=value_name)
    if not groups:
        suffix_list = ', '.join(repr(s) for s in suffix_map.values())
        console.print(f"[warning]No paired columns found for suffixes {suffix_list}[/]")
        raise SystemExit(1)

    used = {c for cols in groups.values() for c in cols}
    identifiers = [c for c in df.columns if c not in used]

    tbl = Table(title="Detected groups", header_style="table.header")
    for name in groups:
        tbl.add_column(name)
    for row in zip(*groups.values()):
        tbl.add_row(*row)
    console.print(tbl)
    console.print(f"[info]Identifiers:[/] {', '.join(str(c) for c in identifiers) or '(none)'}")

    if save_path:
        config = GatherConfig(groups=groups, sheet_name=sheet)
        if key:
            config.key = key
        path = save_config(config, save_path)
        console.print(f"[success]Saved config to {path}[/]")
