"""
paragather CLI module - shared console and commands.
"""
from paragather.cli.console import console, custom_theme
from paragather.cli.helpers import parse_assignments, dataframe_table
from paragather.cli.gather import gather_command
from paragather.cli.detect import detect_command
from paragather.cli.main import cli, main

__all__ = [
    'console',
    'custom_theme',
    'parse_assignments',
    'dataframe_table',
    'gather_command',
    'detect_command',
    'cli',
    'main',
]
