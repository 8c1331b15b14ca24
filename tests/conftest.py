"""Shared test fixtures and configuration."""

import pytest

from pr_size_checker.config import CheckerConfig


@pytest.fixture
def default_config():
    """Thresholds used throughout: warn above 100, fail above 500."""
    return CheckerConfig(error_size=500, warning_size=100)
