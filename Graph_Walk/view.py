"""Events passed from the walk context to the render context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .graph.model import Edge


@dataclass(frozen=True)
class EdgeSelected:
    """The walk committed to ``edge``."""

    edge: Edge

    @property
    def source(self) -> int:
        return self.edge.source

    @property
    def target(self) -> int:
        return self.edge.target


#: Every update the walk may emit.
SimulationUpdate = Union[EdgeSelected]
