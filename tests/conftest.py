"""Shared fixtures."""

from __future__ import annotations

import pytest

from newswire.config.loader import get_default_configuration


@pytest.fixture(autouse=True)
def clear_default_configuration():
    """The default configuration is cached per process; reset it around each test."""
    get_default_configuration.cache_clear()
    yield
    get_default_configuration.cache_clear()
