"""Common test fixtures and utilities."""
import pytest
from loguru import logger


@pytest.fixture
def base_tokens():
    """Smallest token list that resolves."""
    return ["-m", "hybrid"]


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during a test."""
    messages = []
    logger.enable("av1an_cli")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("av1an_cli")
