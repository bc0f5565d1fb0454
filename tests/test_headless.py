from Graph_Walk.engine.channel import open_channel
from Graph_Walk.graph.model import Edge, demo_graph
from Graph_Walk.headless import describe, run_headless
from Graph_Walk.view import EdgeSelected


def test_run_headless_consumes_one_update_per_tick():
    g = demo_graph()
    tx, rx = open_channel()
    for edge in [Edge(0, 1), Edge(1, 4), Edge(4, 0)]:
        tx.send(EdgeSelected(edge))
    renderer = run_headless(g, rx, frame_interval=0.0, max_ticks=2)
    assert describe(renderer) == Edge(1, 4)
    assert rx.pending() == 1


def test_run_headless_stops_when_told():
    g = demo_graph()
    _, rx = open_channel()
    calls = []

    def should_continue() -> bool:
        calls.append(1)
        return len(calls) < 4

    renderer = run_headless(g, rx, frame_interval=0.0, should_continue=should_continue)
    assert len(calls) == 4
    assert describe(renderer) is None
