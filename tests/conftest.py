"""
Shared pytest fixtures for the quantile engine tests.
"""

from __future__ import annotations

import pytest

CONFIG_KEYS = ("QUANTILE_ENGINE_METHOD", "QUANTILE_ENGINE_WHIS", "LOG_LEVEL", "LOG_FILE")

# Batch from the EDA course notes, n=10.
EXAMPLE_BATCH = [12, 9, 14, 8, 15, 15, 15, 10, 9, 13]
EXAMPLE_SORTED = [8, 9, 9, 10, 12, 13, 14, 15, 15, 15]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Run every test without configuration leaking in from the environment or a .env file."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def batch() -> list[int]:
    return list(EXAMPLE_BATCH)


@pytest.fixture
def sorted_batch() -> list[int]:
    return list(EXAMPLE_SORTED)
