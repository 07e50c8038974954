# Area: Test Fixtures
"""Shared fixtures for contract tests."""

import logging
import os
import tempfile

import pytest

from rps_contract import Contract
from rps_contract._registry.database import init_database


@pytest.fixture
def db_path():
    """Create temporary database for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    init_database(path)
    yield path
    os.unlink(path)


@pytest.fixture
def contract(db_path):
    """Contract instantiated by alice."""
    c = Contract(db_path=db_path)
    c.instantiate("alice")
    return c


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so tests don't leak handlers into each other."""
    pkg_logger = logging.getLogger("rps_contract")
    yield
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
