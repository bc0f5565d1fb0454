"""Exception types raised by the graph, walk and highlight layers."""

from __future__ import annotations


class GraphWalkError(Exception):
    """Base class for all package specific errors."""


class InvalidEdgeEndpoint(GraphWalkError, ValueError):
    """An edge references a vertex id outside ``[0, n)``."""

    def __init__(self, source: int, target: int, vertex_count: int) -> None:
        super().__init__(
            f"edge ({source}, {target}) references a vertex outside [0, {vertex_count})"
        )
        self.source = source
        self.target = target
        self.vertex_count = vertex_count


class MissingEdgeSlot(GraphWalkError, IndexError):
    """A vertex has no outgoing edge at the requested slot."""

    def __init__(self, vertex: int, slot: int) -> None:
        super().__init__(f"vertex {vertex} has no outgoing edge in slot {slot}")
        self.vertex = vertex
        self.slot = slot


class DeadEndVertex(GraphWalkError):
    """The walk arrived at a vertex without outgoing edges."""

    def __init__(self, vertex: int) -> None:
        super().__init__(f"vertex {vertex} has no outgoing edges")
        self.vertex = vertex


class UnresolvedEdge(GraphWalkError, LookupError):
    """No renderer handle is registered for an announced edge.

    Raised when the graph driving the walk and the table built by the
    renderer have diverged.
    """

    def __init__(self, source: int, target: int) -> None:
        super().__init__(f"no entity registered for edge ({source}, {target})")
        self.source = source
        self.target = target


class LookupMismatch(GraphWalkError, ValueError):
    """A renderer handle table was built for a different vertex count."""

    def __init__(self, handle_count: int, vertex_count: int) -> None:
        super().__init__(
            f"{handle_count} vertex handles for {vertex_count} vertices"
        )
        self.handle_count = handle_count
        self.vertex_count = vertex_count


class ChannelClosed(GraphWalkError):
    """The consuming end of an update channel has been dropped."""
