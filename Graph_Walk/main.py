# main.py

"""Entry point for launching the graph walk in a window or headless."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from Graph_Walk.config import Config
from Graph_Walk.engine.channel import UpdateReceiver, open_channel
from Graph_Walk.engine.simulation import WalkSimulator
from Graph_Walk.engine.worker import WalkWorker
from Graph_Walk.errors import GraphWalkError
from Graph_Walk.graph.model import Graph, demo_graph

logger = logging.getLogger(__name__)

# Internal Config attributes that should not be exposed as CLI flags
_PRIVATE_KEYS = {
    "base_dir",
    "input_dir",
    "config_file",
}


def _configure_logging() -> None:
    """Configure application logging and capture uncaught exceptions."""

    kwargs: dict[str, Any] = {}
    if Config.log_file:
        kwargs = {"filename": Config.log_file, "filemode": "a"}
    logging.basicConfig(
        level=getattr(logging, str(Config.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        **kwargs,
    )

    def _log_excepthook(exc_type, exc, tb) -> None:
        logging.getLogger(__name__).exception(
            "Uncaught exception", exc_info=(exc_type, exc, tb)
        )

    sys.excepthook = _log_excepthook


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {text!r}")


def _settings(data: dict[str, Any], prefix: str = "") -> Iterator[tuple[str, Any]]:
    """Yield ``(dotted_key, value)`` for every public leaf setting."""
    for key, value in data.items():
        if key in _PRIVATE_KEYS:
            continue
        if isinstance(value, dict):
            yield from _settings(value, prefix=f"{prefix}{key}.")
        else:
            yield f"{prefix}{key}", value


def _flag_type(key: str, value: Any) -> Callable[[str], Any]:
    if isinstance(value, bool):
        return _parse_bool
    if value is None:
        # Optional settings take their type from the Config annotation.
        hint = str(Config.__annotations__.get(key, ""))
        return int if hint.startswith("int") else str
    return type(value)


def _add_config_args(parser: argparse.ArgumentParser, data: dict[str, Any]) -> None:
    """Add one ``--key`` flag per setting, nested keys joined with dots."""
    group = parser.add_argument_group("configuration overrides")
    for key, value in _settings(data):
        group.add_argument(
            f"--{key}", type=_flag_type(key, value), dest=key.replace(".", "_")
        )


def _config_defaults() -> dict[str, Any]:
    """Return the current public settings on :class:`Config`."""
    defaults: dict[str, Any] = {}
    for key, value in Config.__dict__.items():
        if key.startswith("_") or key in _PRIVATE_KEYS:
            continue
        if callable(value) or isinstance(value, (classmethod, staticmethod)):
            continue
        defaults[key] = value
    return defaults


def _apply_overrides(args: argparse.Namespace, data: dict[str, Any]) -> None:
    """Write every flag given on the command line back onto :class:`Config`."""
    for key, _ in _settings(data):
        override = getattr(args, key.replace(".", "_"), None)
        if override is None:
            continue
        head, *rest = key.split(".")
        if not rest:
            setattr(Config, head, override)
            continue
        section = getattr(Config, head)
        for part in rest[:-1]:
            section = section[part]
        section[rest[-1]] = override


@dataclass
class MainService:
    """Handle CLI parsing, wiring of the walk and runtime selection."""

    argv: list[str] | None = None

    def run(self) -> int:
        """Run the walk and return the process exit code."""
        args, cfg = self._parse_args()
        _apply_overrides(args, cfg)
        _configure_logging()

        graph = demo_graph()
        try:
            start = graph.edge(Config.start_vertex, Config.start_slot)
            if Config.validate_graph:
                graph.validate_for_walk(start)
        except GraphWalkError as exc:
            logger.error("Graph cannot drive a walk: %s", exc)
            return 1

        sender, receiver = open_channel()
        walker = WalkSimulator(
            graph,
            sender,
            start,
            dwell_interval=Config.dwell_interval,
            seed=Config.run_seed,
        )
        worker = WalkWorker(walker)
        worker.start()
        status = 0
        try:
            if args.no_gui:
                self._run_headless(graph, receiver, worker)
            else:
                self._launch_gui(graph, receiver, worker)
        except GraphWalkError as exc:
            logger.error("Render loop failed: %s", exc)
            status = 1
        finally:
            receiver.close()
            worker.stop()
        try:
            worker.join()
        except GraphWalkError as exc:
            logger.error("Walk terminated with an error: %s", exc)
            return 1
        logger.info("Walk finished after %d steps", walker.steps)
        return status

    # ------------------------------------------------------------------
    def _parse_args(self) -> tuple[argparse.Namespace, dict[str, Any]]:
        initial = argparse.ArgumentParser(add_help=False)
        initial.add_argument(
            "--config",
            default=Config.input_path("config.json"),
            help="Path to JSON configuration file",
        )
        initial.add_argument(
            "--no-gui",
            action="store_true",
            help="Run the walk without launching the window",
        )
        known, _ = initial.parse_known_args(self.argv)

        if known.config and os.path.exists(known.config):
            Config.load_from_file(known.config)

        parser = argparse.ArgumentParser(
            parents=[initial], description="Visualise a random walk over a graph"
        )
        defaults = _config_defaults()
        _add_config_args(parser, defaults)
        args = parser.parse_args(self.argv)
        return args, defaults

    # ------------------------------------------------------------------
    @staticmethod
    def _run_headless(graph: Graph, receiver: UpdateReceiver, worker: WalkWorker) -> None:
        """Poll the walk without a window until the tick limit is reached."""
        from Graph_Walk.headless import describe, run_headless

        try:
            renderer = run_headless(
                graph,
                receiver,
                frame_interval=Config.frame_interval(),
                max_ticks=Config.max_ticks,
                should_continue=lambda: worker.is_alive() or receiver.pending() > 0,
            )
        except KeyboardInterrupt:
            logger.info("Interrupted")
            return
        logger.info("Last highlighted edge: %s", describe(renderer))

    # ------------------------------------------------------------------
    @staticmethod
    def _launch_gui(graph: Graph, receiver: UpdateReceiver, worker: WalkWorker) -> None:
        """Open the walk window and block until it is closed."""

        from PySide6.QtWidgets import QApplication

        from Graph_Walk.gui_pyside.main_window import WalkWindow

        app = QApplication.instance() or QApplication(sys.argv[:1])
        window = WalkWindow(graph, receiver, worker)
        window.show()
        app.exec()
        if window.fatal_error is not None:
            raise window.fatal_error


def main(argv: list[str] | None = None) -> int:
    return MainService(argv=argv).run()


if __name__ == "__main__":
    sys.exit(main())
