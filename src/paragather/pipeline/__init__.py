"""Gather configuration and persistence"""
from .config import GatherConfig
from .repository import save_config, load_config
