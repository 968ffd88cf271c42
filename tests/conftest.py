import os

import pytest
from loguru import logger

from core.car_state import VehicleState

# Qt widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def car():
    return VehicleState("Tesla", "Model S", 150)


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during the test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
