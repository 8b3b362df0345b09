"""
Shared fixtures for market_timeframe tests.
"""

from unittest.mock import patch

import pytest

from market_timeframe.config import TimeframeConfig, set_config

# 2023-11-14 22:13:00 UTC, on a minute boundary
FIXED_NOW_MS = 1_700_000_000_000 - 20_000


def pytest_configure(config):
    for marker in ('unit', 'timeframe', 'registry', 'batch', 'dates', 'config', 'cli'):
        config.addinivalue_line('markers', f'{marker}: {marker} tests')


@pytest.fixture
def frozen_now():
    """Pin now_ms() to FIXED_NOW_MS."""
    with patch('market_timeframe.timeframe.now_ms', return_value=FIXED_NOW_MS):
        yield FIXED_NOW_MS


@pytest.fixture
def default_config():
    """Run the test with default configuration and restore it afterwards."""
    config = TimeframeConfig.default()
    set_config(config)
    yield config
    set_config(None)
