"""Edge highlight state driven by walk updates.

The controller is the only writer of the highlight state. Each call to
:meth:`HighlightController.step` consumes at most one update and always
restores the previous edge before highlighting the next one, so no more
than one edge is ever drawn as highlighted.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Generic, List, Optional, Protocol, Sequence, Tuple, TypeVar

from .errors import LookupMismatch, UnresolvedEdge
from .graph.model import Graph, VertexId
from .view import EdgeSelected, SimulationUpdate

logger = logging.getLogger(__name__)

H = TypeVar("H")


class Style(Enum):
    """Visual styles the renderer must support for edges."""

    DEFAULT = "default"
    HIGHLIGHTED = "highlighted"


class StyleTarget(Protocol[H]):
    """Renderer side of the contract."""

    def set_style(self, handle: H, style: Style) -> None: ...


class UpdateSource(Protocol):
    def try_recv(self) -> Optional[SimulationUpdate]: ...


class EdgeLookup(Generic[H]):
    """Renderer handles indexed the same way as :attr:`Graph.outgoing`.

    Parameters
    ----------
    vertex_handles:
        Handle for vertex ``i`` at index ``i``.
    edge_handles:
        ``edge_handles[v]`` is an ordered list of ``(to, handle)`` pairs
        mirroring ``graph.outgoing[v]``.
    """

    def __init__(
        self,
        vertex_handles: Sequence[Any],
        edge_handles: Sequence[Sequence[Tuple[VertexId, H]]],
    ) -> None:
        self.vertex_handles: Tuple[Any, ...] = tuple(vertex_handles)
        self.edge_handles: Tuple[Tuple[Tuple[VertexId, H], ...], ...] = tuple(
            tuple(entries) for entries in edge_handles
        )

    def resolve(self, source: VertexId, target: VertexId) -> H:
        """Return the handle of the first ``source -> target`` edge."""

        if not 0 <= source < len(self.edge_handles):
            raise UnresolvedEdge(source, target)
        for to, handle in self.edge_handles[source]:
            if to == target:
                return handle
        raise UnresolvedEdge(source, target)

    def handles(self) -> List[H]:
        return [handle for entries in self.edge_handles for _, handle in entries]

    def check_matches(self, graph: Graph) -> None:
        """Check that the table mirrors ``graph``.

        Raises
        ------
        LookupMismatch
            If the vertex counts differ.
        UnresolvedEdge
            For the first outgoing edge of ``graph`` the table lacks.
        """

        if len(self.vertex_handles) != len(graph):
            raise LookupMismatch(len(self.vertex_handles), len(graph))
        for vertex in range(max(len(graph), len(self.edge_handles))):
            expected = [
                edge.target
                for edge in (graph.outgoing[vertex] if vertex < len(graph) else ())
            ]
            actual = [
                to
                for to, _ in (
                    self.edge_handles[vertex] if vertex < len(self.edge_handles) else ()
                )
            ]
            if expected != actual:
                missing = [t for t in expected if t not in actual] or actual
                raise UnresolvedEdge(vertex, missing[0])


class HighlightController(Generic[H]):
    """Keep exactly one edge highlighted, tracking the walk."""

    def __init__(
        self,
        receiver: UpdateSource,
        lookup: EdgeLookup[H],
        target: StyleTarget[H],
    ) -> None:
        self.receiver = receiver
        self.lookup = lookup
        self.target = target
        self.current: Optional[H] = None

    def step(self) -> Optional[SimulationUpdate]:
        """Apply at most one pending update; return it or ``None``."""

        update = self.receiver.try_recv()
        if update is None:
            return None
        if isinstance(update, EdgeSelected):
            self._highlight(update.source, update.target)
        else:
            raise TypeError(f"unsupported simulation update: {update!r}")
        return update

    def _highlight(self, source: VertexId, target: VertexId) -> None:
        previous, self.current = self.current, None
        if previous is not None:
            self.target.set_style(previous, Style.DEFAULT)
        handle = self.lookup.resolve(source, target)
        self.target.set_style(handle, Style.HIGHLIGHTED)
        self.current = handle
        logger.debug("Highlighted: %s -> %s", source, target)
