# tests/conftest.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

This module provides pytest configuration and fixtures shared by the
formula, analysis and command-line test suites.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for compiled formulas and captured log output
"""

import sys
import logging
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import analysis
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


class _ListHandler(logging.Handler):
    """Logging handler that keeps formatted messages in memory."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def captured_log():
    """Collect messages written through the Tabula logger.

    Yields:
        List[str]: Messages logged while the test runs
    """
    from utils.logger import get_logger

    handler = _ListHandler()
    logger = get_logger().logger
    logger.addHandler(handler)
    try:
        yield handler.messages
    finally:
        logger.removeHandler(handler)


@pytest.fixture
def basic_formula():
    """Provide a basic formula for testing.

    Returns:
        str: Simple contingent formula
    """
    return "p -> q"


@pytest.fixture
def complex_formula():
    """Provide a formula exercising every connective.

    Returns:
        str: Formula mixing all operators and a constant
    """
    return "~(p /\\ q) <-> (r \\/ ~s) -> T"
