"""Designated callback contexts for request completions.

The printer adapter finishes transfers on worker threads. Presentation code
usually may only touch its widgets from one thread, so every completion is
handed to one of the contexts below before it runs.
"""

from __future__ import annotations

import logging
import queue
from typing import Any, Callable, Optional

Callback = Callable[[], None]


def call_inline(fn: Callback) -> None:
    """Run ``fn`` immediately on the calling (worker) thread."""
    fn()


class QueueCallbackContext:
    """Collect callbacks in a queue drained by the owning thread.

    The owner calls :meth:`pump` periodically (for example every 50 ms from a
    Tk ``after`` loop) so callbacks run on its own thread, in arrival order.
    """

    def __init__(self) -> None:
        self._queue: "queue.Queue[Callback]" = queue.Queue()
        self._log = logging.getLogger(__name__)

    def __call__(self, fn: Callback) -> None:
        self._queue.put(fn)

    def pending(self) -> int:
        return self._queue.qsize()

    def pump(self, limit: int = 0) -> int:
        """Run queued callbacks on the current thread.

        Args:
            limit: Maximum number of callbacks to run, ``0`` for all queued.

        Returns:
            Number of callbacks executed.
        """
        ran = 0
        while not limit or ran < limit:
            try:
                fn = self._queue.get_nowait()
            except queue.Empty:
                break
            ran += 1
            try:
                fn()
            except Exception:
                self._log.exception("Completion callback failed")
        return ran


class TkCallbackContext(QueueCallbackContext):
    """Drain completions on the Tk main loop with a repeating ``after`` tick.

    Worker threads only enqueue; ``widget.after`` is called solely from the
    Tk thread, so non-threaded Tcl builds work. Construct the context on the
    Tk thread.
    """

    def __init__(self, widget: Any, interval_ms: int = 50) -> None:
        super().__init__()
        self._widget = widget
        self._interval_ms = max(1, int(interval_ms))
        self._after_id: Optional[str] = None
        self._schedule()

    def _schedule(self) -> None:
        self._after_id = self._widget.after(self._interval_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        self.pump()
        self._schedule()

    def stop(self) -> None:
        """Cancel the pending tick; queued callbacks stay until pumped."""
        if self._after_id is not None:
            self._widget.after_cancel(self._after_id)
            self._after_id = None


__all__ = ["QueueCallbackContext", "TkCallbackContext", "call_inline"]
