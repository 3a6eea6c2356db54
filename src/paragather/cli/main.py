"""
paragather CLI - parallel gathering of wide scientific tables

Commands:
    gather   Melt paired column groups into long form
    detect   Find paired value/uncertainty columns
"""
import logging

import click

from paragather.cli.detect import detect_command
from paragather.cli.gather import gather_command
from paragather.settings import get_log_level


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose: bool):
    """paragather - melt paired column groups in parallel"""
    level = logging.DEBUG if verbose else getattr(logging, get_log_level(), logging.WARNING)
    logging.basicConfig(level=level)


cli.add_command(gather_command)
cli.add_command(detect_command)


def main():
    cli()


if __name__ == '__main__':
    main()
