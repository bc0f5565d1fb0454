# config.py

import json
import os


class Config:
    """Global configuration loaded from ``input/config.json``.

    The shipped file holds the defaults below; ``--config`` points the
    CLI at another file.

    Attributes
    ----------
    dwell_interval:
        Seconds the walk pauses on each edge before choosing the next one.
    frame_interval_ms:
        Milliseconds between render ticks. Each tick consumes at most one
        walk update.
    run_seed:
        Seed for the walk's random generator. ``None`` draws fresh entropy.
    start_vertex, start_slot:
        The walk starts on ``graph.outgoing[start_vertex][start_slot]``.
    max_ticks:
        Render ticks to run in headless mode; ``0`` runs until interrupted.
    validate_graph:
        When ``True`` the graph is checked for dead ends reachable from the
        start edge before the walk is started.
    colors:
        Hex colours for the default edge, the highlighted edge and the
        window background.
    log_level:
        Name of the root logging level.
    log_file:
        Optional path for log output; ``None`` logs to stderr.
    """

    # Base directories for package resources
    base_dir = os.path.abspath(os.path.dirname(__file__))
    input_dir = os.path.join(base_dir, "input")
    config_file = os.path.join(input_dir, "config.json")

    @staticmethod
    def input_path(*parts: str) -> str:
        """Return absolute path under the ``input`` directory."""
        return os.path.join(Config.input_dir, *parts)

    dwell_interval = 2.0
    frame_interval_ms = 16
    run_seed: int | None = None
    start_vertex = 0
    start_slot = 0
    max_ticks = 0
    validate_graph = True

    colors = {
        "default_edge": "#a7c957",
        "highlight_edge": "#e63946",
        "background": "#336699",
    }
    #: Vertex ellipse radius and edge pen width, in layout units
    node_radius = 0.45
    edge_width = 0.04
    #: Scene units per layout unit
    layout_scale = 120.0
    window_title = "Graph Walk: random walk simulation"

    log_level = "INFO"
    log_file: str | None = None

    @classmethod
    def load_from_file(cls, path: str) -> None:
        """Load configuration values from a JSON file.

        Only keys that already exist as attributes on ``Config`` will be
        assigned. Nested dictionaries are merged when the existing attribute
        is also a ``dict``.

        Parameters
        ----------
        path:
            Path to the JSON configuration file.
        """

        if not os.path.exists(path):
            raise FileNotFoundError(path)
        with open(path) as f:
            data = json.load(f)
        cls.config_file = os.path.abspath(path)

        for key, value in data.items():
            if not hasattr(cls, key) or key.startswith("_"):
                continue
            current = getattr(cls, key)
            if isinstance(current, dict) and isinstance(value, dict):
                current.update(value)
            else:
                setattr(cls, key, value)

    @classmethod
    def frame_interval(cls) -> float:
        """Return the render tick interval in seconds."""
        return cls.frame_interval_ms / 1000.0


def load_config(path: str | None = None) -> dict:
    """Load configuration from ``path`` and return the data."""
    if path is None:
        path = Config.input_path("config.json")
    Config.load_from_file(path)
    with open(path) as f:
        return json.load(f)
