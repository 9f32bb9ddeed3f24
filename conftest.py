"""
Root conftest to ensure proper import paths.

This file exists at the project root so that the project directory is in
Python's sys.path before pytest starts collecting tests, which lets the
tests import both the ``logdorak`` package and the ``scripts`` directory
without an editable install.
"""

import sys
from pathlib import Path

import pytest
import structlog

# Ensure project root is in Python path
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Give every test structlog's default configuration."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
