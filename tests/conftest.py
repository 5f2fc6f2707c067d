# tests/conftest.py
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def quiet_logger():
    logger.remove()
    logger.add(lambda msg: None)
    logger.enable("luhn_alphabet")
    yield
    logger.disable("luhn_alphabet")


@pytest.fixture
def log_messages():
    """Collects luhn_alphabet log records as plain strings"""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
