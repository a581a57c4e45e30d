"""Global pytest configuration."""

from __future__ import annotations

import logging

import pytest

from filepath.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Return the filepath root logger to INFO after every test."""
    yield
    set_global_log_level(logging.INFO)
