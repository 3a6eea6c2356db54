"""Pytest configuration for the paragather test suite."""

import pandas as pd
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (may require network access)"
    )


@pytest.fixture
def pocmajsum():
    """Two-row excerpt of sediment core major element summary data."""
    return pd.DataFrame({
        'core': ['MAJ-1', 'MAJ-1'],
        'depth': [1, 2],
        'Ca': [10, 11],
        'Ti': [20, 21],
        'V': [30, 31],
        'Ca_sd': [1, 1],
        'Ti_sd': [2, 2],
        'V_sd': [3, 3],
    })


@pytest.fixture
def flagged():
    """Wide table with value, uncertainty and flag columns and a missing value."""
    return pd.DataFrame({
        'site': ['A', 'A', 'B'],
        'date': ['2020-01-01', '2020-02-01', '2020-01-01'],
        'temp': [1.5, 2.5, None],
        'rain': [10.0, 0.0, 3.2],
        'temp_sd': [0.1, 0.2, None],
        'rain_sd': [1.0, 0.5, 0.3],
        'temp_flag': ['ok', 'ok', 'missing'],
        'rain_flag': ['ok', 'est', 'ok'],
    })
