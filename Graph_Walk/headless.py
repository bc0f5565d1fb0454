from __future__ import annotations

"""Renderer stand-in used for ``--no-gui`` runs."""

import logging
import time
from typing import Callable, Dict, List, Optional, Tuple

from .graph.model import Edge, Graph
from .highlight import EdgeLookup, HighlightController, Style, UpdateSource

logger = logging.getLogger(__name__)


class HeadlessRenderer:
    """Assigns integer handles to graph entities and records their styles.

    Vertex ``i`` gets handle ``i``; edges are numbered in
    ``(from, slot)`` order.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self.edges: List[Edge] = list(graph)
        self.styles: Dict[int, Style] = {
            handle: Style.DEFAULT for handle in range(len(self.edges))
        }
        self.transitions: List[Tuple[int, Style]] = []

    def build_lookup(self) -> EdgeLookup[int]:
        edge_handles: List[List[Tuple[int, int]]] = []
        handle = 0
        for edges in self.graph.outgoing:
            entries = []
            for edge in edges:
                entries.append((edge.target, handle))
                handle += 1
            edge_handles.append(entries)
        return EdgeLookup(range(len(self.graph)), edge_handles)

    def set_style(self, handle: int, style: Style) -> None:
        self.styles[handle] = style
        self.transitions.append((handle, style))
        if style is Style.HIGHLIGHTED:
            logger.info("Edge %s highlighted", self.edges[handle])

    def highlighted(self) -> List[int]:
        return [h for h, style in self.styles.items() if style is Style.HIGHLIGHTED]


def run_headless(
    graph: Graph,
    receiver: UpdateSource,
    *,
    frame_interval: float,
    max_ticks: int = 0,
    should_continue: Optional[Callable[[], bool]] = None,
) -> HeadlessRenderer:
    """Poll ``receiver`` once per frame until ``max_ticks`` or stopped.

    ``max_ticks`` of ``0`` runs until ``should_continue`` returns ``False``
    or the loop is interrupted.
    """

    renderer = HeadlessRenderer(graph)
    controller = HighlightController(receiver, renderer.build_lookup(), renderer)
    tick = 0
    while not max_ticks or tick < max_ticks:
        if should_continue is not None and not should_continue():
            break
        controller.step()
        tick += 1
        if frame_interval:
            time.sleep(frame_interval)
    logger.info("Headless loop finished after %d ticks", tick)
    return renderer


def describe(renderer: HeadlessRenderer) -> Optional[Edge]:
    """Return the edge currently highlighted by ``renderer`` if any."""
    current = renderer.highlighted()
    return renderer.edges[current[0]] if current else None
