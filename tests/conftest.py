"""Shared pytest fixtures for selection-list tests.

Provides reusable selections and configuration objects.
"""

from __future__ import annotations

import pytest

from selection_list.config import SelectionListConfig
from selection_list.selection import Selection


@pytest.fixture
def fruits() -> Selection[str]:
    """Return an unselected selection of three distinct fruits."""
    return Selection.from_list(["apple", "banana", "cherry"])


@pytest.fixture
def numbers() -> Selection[int]:
    """Return ``[1, 2, 3]`` with 2 selected."""
    return Selection.from_list([1, 2, 3]).select(2)


@pytest.fixture
def default_config() -> SelectionListConfig:
    """Return a config with all default values, ignoring any .env file."""
    return SelectionListConfig(_env_file=None)


@pytest.fixture
def diagnostic_config() -> SelectionListConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return SelectionListConfig(_env_file=None, log_level="full", diagnostic_mode=True)


@pytest.fixture
def silent_config() -> SelectionListConfig:
    """Return a config with no logging for noise-free tests."""
    return SelectionListConfig(_env_file=None, log_level="none")
