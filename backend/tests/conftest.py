"""
Central pytest configuration for the clinic records tests.

This file provides common fixtures, test markers, and environment setup
for both unit and integration tests.
"""

import logging

import pytest

from tests.config.markers import pytest_collection_modifyitems, pytest_configure
from tests.fixtures.domain_fixtures import *  # noqa: F401,F403
from tests.fixtures.service_fixtures import *  # noqa: F401,F403

CLINIC_ENV_VARS = (
    "CLINIC_CASCADE_ON_DELETE",
    "CLINIC_CANCELLED_SLOTS_BLOCK",
    "LOG_LEVEL",
    "LOG_JSON_FORMAT",
    "LOG_TO_FILE",
    "LOG_DIR",
)


@pytest.fixture(autouse=True)
def clean_clinic_environment(monkeypatch):
    """Run every test against default settings, whatever the shell exports."""
    for name in CLINIC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def root_logger_guard():
    """Restore root logger handlers and level after a logging setup test."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
        root_logger.removeHandler(handler)
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
