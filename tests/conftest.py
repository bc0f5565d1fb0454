import copy
import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from Graph_Walk.config import Config


@pytest.fixture(autouse=True)
def _restore_config() -> None:
    """Reset :class:`Config` attributes after each test."""

    saved = {
        key: copy.deepcopy(value)
        for key, value in vars(Config).items()
        if not key.startswith("_")
        and not callable(value)
        and not isinstance(value, (classmethod, staticmethod))
    }
    yield
    for key, value in saved.items():
        setattr(Config, key, value)


class RecordingSender:
    """Channel stand-in that closes itself after ``limit`` sends."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.updates = []

    def send(self, update) -> None:
        from Graph_Walk.errors import ChannelClosed

        if len(self.updates) >= self.limit:
            raise ChannelClosed("receiver has been closed")
        self.updates.append(update)


@pytest.fixture
def recording_sender():
    return RecordingSender
