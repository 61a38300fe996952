"""A worker thread that runs one procedure and can be asked to stop."""

from __future__ import annotations

import threading
from typing import Any, Callable


class Thread:
    """Runs a procedure on a background thread; stopping is cooperative."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._running = False
        self._stop_requested = False

    def start(self, proc: Callable[[Any], object] | None, param: Any = None) -> None:
        """Start proc(param) unless a procedure is already running."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self._stop_requested = False
            self._thread = threading.Thread(target=self._run, args=(proc, param), daemon=True)
            self._thread.start()

    def _run(self, proc: Callable[[Any], object] | None, param: Any) -> None:
        try:
            if proc is not None:
                proc(param)
        finally:
            self._running = False

    def stop(self) -> None:
        """Ask a running procedure to finish; it polls stop_requested()."""
        if self._running:
            self._stop_requested = True

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the procedure to finish; true if it has."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def is_running(self) -> bool:
        return self._running

    def stop_requested(self) -> bool:
        return self._stop_requested