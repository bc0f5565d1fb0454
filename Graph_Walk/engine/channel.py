"""Single-producer single-consumer channel for walk updates.

The sender never blocks and the receiver only ever polls, so the render
loop cannot stall on the walk. Closing the receiver is how the render
context tells the walk to stop: the next :meth:`UpdateSender.send` raises
:class:`~Graph_Walk.errors.ChannelClosed`.
"""

from __future__ import annotations

import queue
import threading
from typing import Optional, Tuple

from ..errors import ChannelClosed
from ..view import SimulationUpdate


class _ChannelState:
    def __init__(self) -> None:
        self.items: "queue.SimpleQueue[SimulationUpdate]" = queue.SimpleQueue()
        self.receiver_closed = threading.Event()
        self.sender_closed = threading.Event()


class UpdateSender:
    """Producer end held by the walk context."""

    def __init__(self, state: _ChannelState) -> None:
        self._state = state

    def send(self, update: SimulationUpdate) -> None:
        """Queue ``update`` for the consumer.

        Raises
        ------
        ChannelClosed
            If the receiver has been closed or this sender was closed.
        """

        if self._state.receiver_closed.is_set():
            raise ChannelClosed("receiver has been closed")
        if self._state.sender_closed.is_set():
            raise ChannelClosed("sender has been closed")
        self._state.items.put(update)

    def close(self) -> None:
        self._state.sender_closed.set()

    @property
    def closed(self) -> bool:
        return self._state.receiver_closed.is_set() or self._state.sender_closed.is_set()


class UpdateReceiver:
    """Consumer end polled by the render context once per tick."""

    def __init__(self, state: _ChannelState) -> None:
        self._state = state

    def try_recv(self) -> Optional[SimulationUpdate]:
        """Return the oldest pending update or ``None`` without waiting.

        A closed sender is not an error: buffered updates are still
        delivered, after which ``None`` is returned indefinitely.
        """

        if self._state.receiver_closed.is_set():
            return None
        try:
            return self._state.items.get_nowait()
        except queue.Empty:
            return None

    def pending(self) -> int:
        """Approximate number of buffered updates."""
        return self._state.items.qsize()

    def close(self) -> None:
        """Drop the consumer end; subsequent sends fail."""
        self._state.receiver_closed.set()

    @property
    def sender_closed(self) -> bool:
        return self._state.sender_closed.is_set()


def open_channel() -> Tuple[UpdateSender, UpdateReceiver]:
    """Return a connected ``(sender, receiver)`` pair."""
    state = _ChannelState()
    return UpdateSender(state), UpdateReceiver(state)
