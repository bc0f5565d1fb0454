from __future__ import annotations

import logging
import threading
from typing import Optional

from .simulation import WalkSimulator

logger = logging.getLogger(__name__)


class WalkWorker:
    """Background worker that runs a :class:`WalkSimulator` on its own thread.

    Any exception escaping the walk is kept and re-raised from :meth:`join`
    so the owning process can report it after the render loop ends.
    """

    def __init__(self, walker: WalkSimulator, *, name: str = "graph-walk") -> None:
        """Initialise the worker with the ``walker`` to drive."""
        self._walker = walker
        self._lock = threading.Lock()
        self._error: Optional[BaseException] = None
        self._thread = threading.Thread(target=self.run, name=name, daemon=True)

    @property
    def walker(self) -> WalkSimulator:
        return self._walker

    def start(self) -> None:
        self._thread.start()

    def run(self) -> None:
        """Run the walk, capturing any fatal error."""
        try:
            self._walker.run()
        except Exception as exc:
            logger.error("Walk failed: %s", exc)
            with self._lock:
                self._error = exc
        finally:
            close = getattr(self._walker.sender, "close", None)
            if close is not None:
                close()

    @property
    def error(self) -> Optional[BaseException]:
        with self._lock:
            return self._error

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def stop(self) -> None:
        """Ask the walk to finish at its next dwell."""
        self._walker.stop()

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the walk thread and re-raise its error, if any."""
        if self._thread.ident is not None:
            self._thread.join(timeout)
        error = self.error
        if error is not None:
            raise error
