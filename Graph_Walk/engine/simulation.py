"""Random walk over a :class:`~Graph_Walk.graph.model.Graph`.

The walk emits the current edge, dwells for a fixed interval and then
moves to an edge picked uniformly at random among the arrival vertex's
outgoing edges. It runs until the consumer closes the channel or
:meth:`WalkSimulator.stop` is called.
"""

from __future__ import annotations

import logging
import random
import threading
from enum import Enum
from typing import Optional, Protocol

from ..errors import ChannelClosed, DeadEndVertex
from ..graph.model import Edge, Graph
from ..view import EdgeSelected, SimulationUpdate

logger = logging.getLogger(__name__)


class UpdateSink(Protocol):
    def send(self, update: SimulationUpdate) -> None: ...


class WalkState(Enum):
    """Lifecycle of a :class:`WalkSimulator`."""

    RUNNING = "running"
    STOPPED = "stopped"


class WalkSimulator:
    """Drive a random walk and announce every selected edge.

    Parameters
    ----------
    graph:
        Topology to walk. Never mutated.
    sender:
        Channel end receiving one :class:`EdgeSelected` per step.
    start_edge:
        First edge to emit.
    dwell_interval:
        Seconds to pause between steps.
    rng:
        Random source for the edge choice. Takes precedence over ``seed``.
    seed:
        Seed for a private :class:`random.Random` when ``rng`` is omitted.
    """

    def __init__(
        self,
        graph: Graph,
        sender: UpdateSink,
        start_edge: Edge,
        *,
        dwell_interval: float = 2.0,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if dwell_interval < 0:
            raise ValueError("dwell_interval must be non-negative")
        self.graph = graph
        self.sender = sender
        self.current = start_edge
        self.dwell_interval = dwell_interval
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = WalkState.RUNNING
        self.steps = 0
        self._stop = threading.Event()

    def stop(self) -> None:
        """Ask the walk to finish; interrupts a pending dwell."""
        self._stop.set()

    def step(self) -> bool:
        """Emit the current edge and advance once.

        Returns ``False`` when the walk has stopped instead of advancing.

        Raises
        ------
        DeadEndVertex
            If the arrival vertex has no outgoing edges.
        """

        if self.state is WalkState.STOPPED:
            return False
        try:
            self.sender.send(EdgeSelected(self.current))
        except ChannelClosed:
            logger.info("Update channel closed; stopping walk after %d steps", self.steps)
            self.state = WalkState.STOPPED
            return False
        self.steps += 1
        logger.info("Selected: %s", self.current)

        if self._stop.wait(self.dwell_interval):
            logger.info("Walk stop requested after %d steps", self.steps)
            self.state = WalkState.STOPPED
            return False

        arrival = self.current.target
        edges = self.graph.outgoing[arrival]
        if not edges:
            self.state = WalkState.STOPPED
            raise DeadEndVertex(arrival)
        self.current = edges[self.rng.randrange(len(edges))]
        return True

    def run(self) -> None:
        """Walk until stopped; a closed channel is a clean exit."""
        while self.step():
            pass

