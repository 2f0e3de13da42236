"""
Shared pytest fixtures and configuration for all tests.

This module provides common fixtures used across multiple test files to reduce
duplication and ensure consistent test isolation.
"""

import pytest

from insightify.utils.settings import DEFAULT_LAYOUT_PATH, config


@pytest.fixture(autouse=True)
def reset_config():
    """
    Save and restore config values for test isolation.

    This fixture runs automatically for all tests to ensure environment
    configuration doesn't leak between tests.
    """
    # Save original values
    original_values = {
        "log_level": config.log_level,
    }
    original_layout_path = config.extraction.layout_path

    # Set test defaults
    config.log_level = "INFO"
    config.extraction.layout_path = DEFAULT_LAYOUT_PATH

    yield

    # Restore original values
    for key, value in original_values.items():
        setattr(config, key, value)
    config.extraction.layout_path = original_layout_path
