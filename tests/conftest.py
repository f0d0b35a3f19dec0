from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _detach_log_handlers():
    """Drop handlers SolverEngine attaches so streams don't outlive a test."""
    yield
    package_logger = logging.getLogger("trebuchet")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
