from __future__ import annotations

"""Read-only :class:`QGraphicsView` drawing a walk graph."""

import random
from typing import List, Optional, Tuple, Union

import numpy as np
from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QWheelEvent
from PySide6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsLineItem,
    QGraphicsPathItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
    QGraphicsView,
    QWidget,
)

from ..config import Config
from ..graph.model import Graph, VertexId
from ..highlight import EdgeLookup, Style

# Oblique projection of the (x, y, z) placement onto the screen plane.
_PROJECTION = np.array([[1.0, 0.0], [0.0, -1.0], [-0.35, -0.35]])


def vertex_positions(vertex_count: int) -> np.ndarray:
    """Return ``(n, 3)`` placement coordinates for ``vertex_count`` vertices.

    Vertex ``i`` sits at ``(i, i % 2, 2 * (i % 3))``.
    """

    ids = np.arange(vertex_count, dtype=float)
    return np.column_stack((ids, ids % 2, (ids % 3) * 2.0))


def project(positions: np.ndarray, scale: float) -> np.ndarray:
    """Project ``(n, 3)`` placements to ``(n, 2)`` scene coordinates."""
    return positions @ _PROJECTION * scale


def random_light_color(rng: random.Random) -> QColor:
    """Return a light orange-ish colour for a vertex."""
    return QColor.fromHsvF(
        rng.uniform(0.05, 0.12), rng.uniform(0.25, 0.55), rng.uniform(0.9, 1.0)
    )


class NodeItem(QGraphicsEllipseItem):
    """Ellipse representing a graph vertex."""

    def __init__(
        self, vertex_id: VertexId, x: float, y: float, radius: float, color: QColor
    ) -> None:
        super().__init__(-radius, -radius, radius * 2, radius * 2)
        self.vertex_id = vertex_id
        self.setPos(QPointF(x, y))
        self.setBrush(QBrush(color))
        self.setPen(QPen(Qt.NoPen))
        self.setZValue(1)
        self.setToolTip(f"vertex {vertex_id}")


class EdgeItem(QGraphicsLineItem):
    """Line connecting two NodeItems."""

    def __init__(self, source: NodeItem, target: NodeItem, width: float) -> None:
        super().__init__()
        self.source = source
        self.target = target
        self.width = width
        self.setZValue(0)
        self.setLine(source.x(), source.y(), target.x(), target.y())


class SelfEdgeItem(QGraphicsPathItem):
    """Curved edge originating and ending on the same node."""

    def __init__(self, node: NodeItem, width: float) -> None:
        super().__init__()
        self.source = node
        self.target = node
        self.width = width
        self.setZValue(0)
        radius = node.rect().width() / 2
        path = QPainterPath()
        start = QPointF(node.x() + radius, node.y())
        end = QPointF(node.x() - radius, node.y())
        offset = radius * 2
        ctrl1 = QPointF(node.x() + offset, node.y() - offset)
        ctrl2 = QPointF(node.x() - offset, node.y() - offset)
        path.moveTo(start)
        path.cubicTo(ctrl1, ctrl2, end)
        self.setPath(path)


EdgeHandle = Union[EdgeItem, SelfEdgeItem]


class WalkCanvas(QGraphicsView):
    """Graphics view displaying the walk graph with antialiasing enabled.

    Implements the renderer side of the highlight contract: every vertex
    and edge gets an item, and :meth:`set_style` recolours an edge item.
    """

    def __init__(self, graph: Graph, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setScene(QGraphicsScene(self))
        self.setRenderHint(QPainter.Antialiasing)
        self.setBackgroundBrush(QBrush(QColor(Config.colors["background"])))
        self.nodes: List[NodeItem] = []
        self.edges: List[List[Tuple[VertexId, EdgeHandle]]] = []
        self._hud_item: Optional[QGraphicsSimpleTextItem] = None
        self.load_graph(graph)

    def load_graph(self, graph: Graph) -> None:
        """Populate the scene from ``graph``."""

        scene = self.scene()
        scene.clear()
        self.nodes.clear()
        self.edges.clear()

        scale = Config.layout_scale
        radius = Config.node_radius * scale
        width = Config.edge_width * scale
        rng = random.Random(Config.run_seed)
        coords = project(vertex_positions(len(graph)), scale)
        for vertex in graph.vertices:
            x, y = coords[vertex.id]
            item = NodeItem(vertex.id, float(x), float(y), radius, random_light_color(rng))
            scene.addItem(item)
            self.nodes.append(item)

        for edges in graph.outgoing:
            entries: List[Tuple[VertexId, EdgeHandle]] = []
            for edge in edges:
                src = self.nodes[edge.source]
                dst = self.nodes[edge.target]
                item = SelfEdgeItem(src, width) if src is dst else EdgeItem(src, dst, width)
                self.set_style(item, Style.DEFAULT)
                scene.addItem(item)
                entries.append((edge.target, item))
            self.edges.append(entries)

        self._hud_item = QGraphicsSimpleTextItem("")
        self._hud_item.setBrush(QBrush(Qt.white))
        self._hud_item.setZValue(2)
        bounds = scene.itemsBoundingRect()
        self._hud_item.setPos(bounds.left(), bounds.top() - 2 * radius)
        scene.addItem(self._hud_item)

    def build_lookup(self) -> EdgeLookup[EdgeHandle]:
        """Return the handle table consumed by the highlight controller."""
        return EdgeLookup(self.nodes, self.edges)

    def set_style(self, handle: EdgeHandle, style: Style) -> None:
        key = "highlight_edge" if style is Style.HIGHLIGHTED else "default_edge"
        pen = QPen(QColor(Config.colors[key]))
        pen.setWidthF(handle.width * (2.0 if style is Style.HIGHLIGHTED else 1.0))
        handle.setPen(pen)
        handle.setZValue(0.5 if style is Style.HIGHLIGHTED else 0)

    def update_hud(self, text: str) -> None:
        """Update the on-canvas HUD text."""
        if self._hud_item is not None:
            self._hud_item.setText(text)

    def wheelEvent(self, event: QWheelEvent) -> None:
        factor = 1.15 if event.angleDelta().y() > 0 else 1 / 1.15
        self.scale(factor, factor)
