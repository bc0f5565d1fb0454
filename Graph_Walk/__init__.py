"""Graph_Walk package initialization."""

from __future__ import annotations

from typing import Any

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from .engine.simulation import WalkSimulator
    from .graph.model import Edge, Graph
    from .highlight import HighlightController

__all__ = ["Edge", "Graph", "HighlightController", "WalkSimulator"]


def __getattr__(name: str) -> Any:  # pragma: no cover - attribute access
    """Lazily expose the core types without importing the GUI stack."""

    if name in {"Edge", "Graph"}:
        from .graph import model

        return getattr(model, name)
    if name == "WalkSimulator":
        from .engine.simulation import WalkSimulator as _WalkSimulator

        return _WalkSimulator
    if name == "HighlightController":
        from .highlight import HighlightController as _HighlightController

        return _HighlightController
    raise AttributeError(name)
