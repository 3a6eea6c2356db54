"""Gather configuration persistence"""
import logging
from pathlib import Path
from typing import Union

from .config import GatherConfig

logger = logging.getLogger(__name__)


def save_config(config: GatherConfig, path: Union[str, Path]) -> Path:
    """Write a configuration as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_json() + '\n', encoding='utf-8')
    logger.debug(f"Saved config with groups {config.group_names()} to {path}")
    return path


def load_config(path: Union[str, Path]) -> GatherConfig:
    """Read a configuration written by save_config()."""
    path = Path(path)
    config = GatherConfig.from_json(path.read_text(encoding='utf-8'))
    logger.debug(f"Loaded config with groups {config.group_names()} from {path}")
    return config
