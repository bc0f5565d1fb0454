"""Walk engine: update channel, simulator and worker thread."""

from .channel import UpdateReceiver, UpdateSender, open_channel
from .simulation import WalkSimulator, WalkState
from .worker import WalkWorker

__all__ = [
    "UpdateReceiver",
    "UpdateSender",
    "WalkSimulator",
    "WalkState",
    "WalkWorker",
    "open_channel",
]
