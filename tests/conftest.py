"""
Fixtures shared by all syncprint test suites.
"""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """
    Collect syncprint's loguru diagnostics emitted during the test.

    Usage: def test_something(log_messages):
           ...
           assert any("default config" in m for m in log_messages)
    """
    messages = []
    logger.enable("syncprint")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("syncprint")
