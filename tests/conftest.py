"""Pytest configuration and shared fixtures."""

import pytest
import os
import logging

from monitoring_plugin.performance_data import PerformanceData, PerformanceDataPoint

# Disable logging during tests to reduce noise
logging.disable(logging.CRITICAL)


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Clean environment variables and run each test in an empty directory."""
    env_vars_to_clean = [
        "PERFDATA_JSON_LABEL",
        "PERFDATA_DEFAULT_MESSAGE",
        "LOG_LEVEL",
    ]

    for var in env_vars_to_clean:
        monkeypatch.delenv(var, raising=False)

    # Keep config auto-discovery and .env loading away from the developer's files
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))

    yield

    # load_dotenv writes straight into os.environ, bypassing monkeypatch
    for var in env_vars_to_clean:
        os.environ.pop(var, None)


@pytest.fixture
def full_point():
    """Data point with every threshold and bound set."""
    return (
        PerformanceDataPoint("metric", 10, "s")
        .set_warn(40)
        .set_crit(50)
        .set_min(0)
        .set_max(60)
    )


@pytest.fixture
def performance_data():
    """Empty performance data collection."""
    return PerformanceData()
