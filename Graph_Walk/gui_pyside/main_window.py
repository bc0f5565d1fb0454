from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QWidget

from ..config import Config
from ..engine.channel import UpdateReceiver
from ..engine.worker import WalkWorker
from ..errors import GraphWalkError
from ..graph.model import Graph
from ..highlight import HighlightController
from .canvas_widget import WalkCanvas

logger = logging.getLogger(__name__)


class WalkWindow(QMainWindow):
    """Main window rendering the graph and tracking the walk.

    A :class:`QTimer` drives one :meth:`HighlightController.step` per frame.
    Closing the window drops the receiver so the walk shuts down on its
    next send.
    """

    def __init__(
        self,
        graph: Graph,
        receiver: UpdateReceiver,
        worker: Optional[WalkWorker] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(Config.window_title)
        self.resize(800, 600)
        self._receiver = receiver
        self._worker = worker
        self.fatal_error: Optional[GraphWalkError] = None

        self.canvas = WalkCanvas(graph, self)
        self.setCentralWidget(self.canvas)
        lookup = self.canvas.build_lookup()
        lookup.check_matches(graph)
        self.controller = HighlightController(receiver, lookup, self.canvas)
        self.statusBar().showMessage("Waiting for the walk...")

        self._timer = QTimer(self)
        self._timer.setInterval(Config.frame_interval_ms)
        self._timer.timeout.connect(self._on_frame)
        self._timer.start()

    def _on_frame(self) -> None:
        """Advance the highlight by at most one walk update."""
        try:
            update = self.controller.step()
        except GraphWalkError as exc:
            logger.error("Highlight failed: %s", exc)
            self.fatal_error = exc
            self.close()
            return
        if update is not None:
            text = f"Edge {update.edge}"
            self.canvas.update_hud(text)
            self.statusBar().showMessage(text)
            return
        worker = self._worker
        if worker is not None and worker.error is not None and not worker.is_alive():
            self.statusBar().showMessage(f"Walk stopped: {worker.error}")
            self._timer.stop()

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        """Stop the frame timer and release the walk before closing."""
        self._timer.stop()
        self._receiver.close()
        if self._worker is not None:
            self._worker.stop()
        super().closeEvent(event)
