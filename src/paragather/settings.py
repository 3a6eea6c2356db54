"""Environment-driven settings"""
import os

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_KEY = 'param'
DEFAULT_HTTP_TIMEOUT = 60


def get_log_level() -> str:
    """Log level name for the CLI (PARAGATHER_LOG_LEVEL, default WARNING)."""
    return os.getenv('PARAGATHER_LOG_LEVEL', 'WARNING').upper()


def get_default_key() -> str:
    """Key column name used when none is given."""
    return os.getenv('PARAGATHER_DEFAULT_KEY') or DEFAULT_KEY


def get_http_timeout() -> float:
    """Timeout in seconds for downloading source tables."""
    value = os.getenv('PARAGATHER_HTTP_TIMEOUT', '')
    try:
        return float(value) if value else DEFAULT_HTTP_TIMEOUT
    except ValueError:
        raise ValueError(f"PARAGATHER_HTTP_TIMEOUT must be a number, got {value!r}") from None
