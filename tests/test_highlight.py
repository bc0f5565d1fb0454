import pytest

from Graph_Walk.engine.channel import open_channel
from Graph_Walk.errors import GraphWalkError, LookupMismatch, UnresolvedEdge
from Graph_Walk.graph.model import Edge, Graph, demo_graph
from Graph_Walk.headless import HeadlessRenderer
from Graph_Walk.highlight import EdgeLookup, HighlightController, Style
from Graph_Walk.view import EdgeSelected


class CheckingRenderer(HeadlessRenderer):
    """Fails if two edges are ever highlighted at once."""

    def set_style(self, handle, style):
        super().set_style(handle, style)
        assert len(self.highlighted()) <= 1


def _controller(graph):
    tx, rx = open_channel()
    renderer = CheckingRenderer(graph)
    controller = HighlightController(rx, renderer.build_lookup(), renderer)
    return tx, controller, renderer


def test_step_without_updates_is_noop():
    tx, controller, renderer = _controller(demo_graph())
    assert controller.step() is None
    assert controller.current is None
    assert renderer.transitions == []

    tx.send(EdgeSelected(Edge(0, 1)))
    controller.step()
    before = (controller.current, dict(renderer.styles), list(renderer.transitions))
    assert controller.step() is None
    assert (controller.current, renderer.styles, renderer.transitions) == before


def test_previous_edge_restored_before_next_highlighted():
    g = demo_graph()
    tx, controller, renderer = _controller(g)
    lookup = controller.lookup
    tx.send(EdgeSelected(Edge(0, 1)))
    tx.send(EdgeSelected(Edge(1, 4)))

    assert controller.step() == EdgeSelected(Edge(0, 1))
    first = lookup.resolve(0, 1)
    assert controller.current == first
    assert renderer.highlighted() == [first]

    controller.step()
    second = lookup.resolve(1, 4)
    assert renderer.transitions == [
        (first, Style.HIGHLIGHTED),
        (first, Style.DEFAULT),
        (second, Style.HIGHLIGHTED),
    ]
    assert renderer.highlighted() == [second]
    assert controller.current == second


def test_backlog_drains_one_update_per_step():
    g = demo_graph()
    tx, controller, renderer = _controller(g)
    walk = [Edge(0, 1), Edge(1, 2), Edge(2, 3), Edge(3, 0)]
    for edge in walk:
        tx.send(EdgeSelected(edge))
    seen = []
    for _ in range(len(walk)):
        seen.append(controller.step().edge)
        assert len(renderer.highlighted()) == 1
    assert seen == walk
    assert controller.step() is None
    assert renderer.edges[controller.current] == Edge(3, 0)


def test_repeated_edge_stays_highlighted():
    tx, controller, renderer = _controller(demo_graph())
    tx.send(EdgeSelected(Edge(0, 1)))
    tx.send(EdgeSelected(Edge(0, 1)))
    controller.step()
    controller.step()
    assert renderer.highlighted() == [controller.lookup.resolve(0, 1)]


def test_unknown_edge_raises_unresolved():
    tx, controller, _ = _controller(demo_graph())
    tx.send(EdgeSelected(Edge(0, 3)))
    with pytest.raises(UnresolvedEdge) as info:
        controller.step()
    assert (info.value.source, info.value.target) == (0, 3)


def test_unknown_update_type_rejected():
    tx, controller, _ = _controller(demo_graph())
    tx.send("bogus")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        controller.step()


def test_resolve_picks_first_parallel_edge():
    g = Graph.construct(2, [(0, 1), (0, 1), (1, 0)])
    renderer = HeadlessRenderer(g)
    lookup = renderer.build_lookup()
    assert lookup.resolve(0, 1) == 0
    assert lookup.resolve(1, 0) == 2
    assert lookup.handles() == [0, 1, 2]


def test_check_matches_detects_divergent_graphs():
    g = demo_graph()
    lookup = HeadlessRenderer(g).build_lookup()
    lookup.check_matches(g)
    other = Graph.construct(5, [(0, 1), (1, 2), (2, 3), (3, 0), (1, 3), (4, 0)])
    with pytest.raises(UnresolvedEdge) as info:
        lookup.check_matches(other)
    assert info.value.source == 1


def test_check_matches_rejects_other_vertex_count():
    lookup = HeadlessRenderer(demo_graph()).build_lookup()
    bigger = Graph.construct(6, [(0, 1), (1, 2), (2, 3), (3, 0), (1, 4), (4, 0)])
    with pytest.raises(LookupMismatch) as info:
        lookup.check_matches(bigger)
    assert isinstance(info.value, GraphWalkError)
    assert (info.value.handle_count, info.value.vertex_count) == (5, 6)


def test_lookup_with_custom_handles():
    lookup = EdgeLookup(["a", "b"], [[(1, "ab")], [(0, "ba"), (1, "bb")]])
    assert lookup.resolve(1, 1) == "bb"
    with pytest.raises(UnresolvedEdge):
        lookup.resolve(2, 0)
