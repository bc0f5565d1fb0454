from __future__ import annotations

"""Immutable directed multigraph used to drive the random walk."""

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

from ..errors import DeadEndVertex, InvalidEdgeEndpoint, MissingEdgeSlot

VertexId = int


@dataclass(frozen=True)
class Vertex:
    """Graph vertex identified by its dense index."""

    id: VertexId
    data: Any = None


@dataclass(frozen=True)
class Edge:
    """Directed edge from ``source`` to ``target``.

    Parallel edges compare equal; they are told apart by their slot in
    :attr:`Graph.outgoing`.
    """

    source: VertexId
    target: VertexId

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"


@dataclass(frozen=True)
class Graph:
    """Read-only graph with per-vertex outgoing edge lists.

    Attributes
    ----------
    vertices:
        Vertex ``i`` lives at index ``i``.
    outgoing:
        ``outgoing[v]`` lists the edges leaving ``v`` in insertion order.
    """

    vertices: Tuple[Vertex, ...]
    outgoing: Tuple[Tuple[Edge, ...], ...]

    @classmethod
    def construct(
        cls, n: int, edges: Iterable[Tuple[VertexId, VertexId]]
    ) -> "Graph":
        """Build a graph with ``n`` vertices from ``(from, to)`` pairs.

        Raises
        ------
        InvalidEdgeEndpoint
            If any pair references an id outside ``[0, n)``.
        """

        if n < 1:
            raise ValueError("a graph needs at least one vertex")
        buckets: list[list[Edge]] = [[] for _ in range(n)]
        for source, target in edges:
            if not (0 <= source < n and 0 <= target < n):
                raise InvalidEdgeEndpoint(source, target, n)
            buckets[source].append(Edge(source, target))
        return cls(
            vertices=tuple(Vertex(i) for i in range(n)),
            outgoing=tuple(tuple(bucket) for bucket in buckets),
        )

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Edge]:
        """Yield every edge grouped by source in slot order."""
        for edges in self.outgoing:
            yield from edges

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.outgoing)

    def out_degree(self, vertex: VertexId) -> int:
        return len(self.outgoing[vertex])

    def edge(self, vertex: VertexId, slot: int = 0) -> Edge:
        """Return the ``slot``-th outgoing edge of ``vertex``.

        Raises :class:`InvalidEdgeEndpoint` for an unknown vertex and
        :class:`MissingEdgeSlot` when ``vertex`` has fewer edges.
        """

        if not 0 <= vertex < len(self.vertices):
            raise InvalidEdgeEndpoint(vertex, vertex, len(self.vertices))
        edges = self.outgoing[vertex]
        if not 0 <= slot < len(edges):
            raise MissingEdgeSlot(vertex, slot)
        return edges[slot]

    def validate_for_walk(self, start: Edge | None = None) -> None:
        """Check that a walk can never reach a vertex without exits.

        With ``start`` every vertex reachable from ``start.target`` is
        checked in breadth-first order. Without it every vertex that is the
        target of some edge is checked.

        Raises
        ------
        DeadEndVertex
            For the first vertex found with an empty outgoing list.
        """

        if start is None:
            for edge in self:
                if not self.outgoing[edge.target]:
                    raise DeadEndVertex(edge.target)
            return

        seen = {start.target}
        queue = deque([start.target])
        while queue:
            vertex = queue.popleft()
            edges = self.outgoing[vertex]
            if not edges:
                raise DeadEndVertex(vertex)
            for edge in edges:
                if edge.target not in seen:
                    seen.add(edge.target)
                    queue.append(edge.target)


def demo_graph() -> Graph:
    """Return the five vertex graph used by the demo and the tests."""
    return Graph.construct(5, [(0, 1), (1, 2), (2, 3), (3, 0), (1, 4), (4, 0)])
