"""REST adapter for printer info lookup and message delivery.

Two delivery channels are kept per adapter instance:

* the *interactive* channel serves calls whose caller waits for a completion
  callback (``fetch_printer_info`` and ``send_message``);
* the *deferred* channel carries fire-and-forget background sends whose
  outcome is only logged.

Each channel owns one ``PrinterSession`` and one thread pool. Both are built
lazily on first use and shared by every call until ``close``.

Completion callbacks registered on a ``PendingRequest`` are always delivered
through the adapter's ``callback_context`` (for example a Tk ``after`` hook),
regardless of which worker thread finished the transfer.

Cancellation:
    ``PendingRequest.cancel`` always makes the completion fire with
    ``concurrent.futures.CancelledError``. A request that has not started is
    never sent. A request already on the wire runs to the end and its outcome
    is discarded.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Any, Callable, Generic, Optional, TypeVar

from littleprinter.domain.errors import InvalidURLError, PrinterError, UnknownError
from littleprinter.domain.messages import (
    OutboundMessage,
    PrinterKey,
    TransferOutcome,
    is_valid_url,
)
from littleprinter.domain.ports import CallbackContext, PrinterPort

from .http_client import HttpConfig, PrinterSession
from .response_classifier import classify_outcome

T = TypeVar("T")

SessionFactory = Callable[[HttpConfig], PrinterSession]

_log = logging.getLogger(__name__)


class PendingRequest(Generic[T]):
    """Handle for one in-flight interactive request.

    The handle mirrors the ``concurrent.futures.Future`` API. Done callbacks
    receive the handle itself and run on the designated callback context.
    """

    def __init__(self, context: str, callback_context: CallbackContext) -> None:
        self.context = context
        self._callback_context = callback_context
        self._future: Future = Future()
        self._lock = threading.Lock()
        self._cancel_requested = False
        self._finishing = False

    def add_done_callback(self, fn: Callable[["PendingRequest[T]"], Any]) -> None:
        """Register ``fn`` to run on the callback context once the request ends."""

        def _deliver(_fut: Future) -> None:
            self._callback_context(lambda: fn(self))

        self._future.add_done_callback(_deliver)

    def result(self, timeout: Optional[float] = None) -> T:
        return self._future.result(timeout)

    def exception(self, timeout: Optional[float] = None) -> Optional[BaseException]:
        exc = self._future.exception(timeout)
        if isinstance(exc, CancelledError):
            raise exc
        return exc

    def done(self) -> bool:
        return self._future.done()

    def cancelled(self) -> bool:
        if self._future.cancelled():
            return True
        return self._future.done() and isinstance(
            self._future.exception(0), CancelledError
        )

    def cancel(self) -> bool:
        """Request cancellation.

        Returns:
            ``True`` if the completion will report ``CancelledError``,
            ``False`` if the request had already finished.
        """
        if self._future.cancel():
            return True
        with self._lock:
            if self._future.done() or self._finishing:
                return False
            self._cancel_requested = True
        _log.debug("Cancellation requested for in-flight %s", self.context)
        return True

    # ------------------------------------------------------------------
    # Worker side
    def _run(
        self,
        transfer: Callable[[], TransferOutcome],
        *,
        require_body: bool = False,
        keep_body: bool = True,
    ) -> None:
        if not self._future.set_running_or_notify_cancel():
            return
        try:
            outcome = transfer()
            body = classify_outcome(
                outcome, require_body=require_body, context=self.context
            )
        except Exception as exc:
            self._finish(error=exc)
        else:
            self._finish(value=body if keep_body else None)

    def _fail(self, error: BaseException) -> None:
        if self._future.set_running_or_notify_cancel():
            self._finish(error=error)

    def _finish(self, *, value: Any = None, error: Optional[BaseException] = None) -> None:
        with self._lock:
            if self._cancel_requested:
                error = CancelledError()
            self._finishing = True
        if error is not None:
            if not isinstance(error, CancelledError):
                _log.warning("%s failed: %s", self.context, error)
            self._future.set_exception(error)
        else:
            self._future.set_result(value)


class _Channel:
    """One session plus the thread pool that drives it."""

    def __init__(self, name: str, session: PrinterSession, workers: int) -> None:
        self.name = name
        self.session = session
        self.executor = ThreadPoolExecutor(
            max_workers=max(1, int(workers)),
            thread_name_prefix=f"printer-{name}",
        )

    def close(self, wait: bool) -> None:
        self.executor.shutdown(wait=wait)
        self.session.close()


class PrinterRestAdapter(PrinterPort):
    """REST adapter for the printer service (info GET, message POST)."""

    def __init__(
        self,
        cfg: Optional[HttpConfig] = None,
        *,
        callback_context: Optional[CallbackContext] = None,
        session_factory: Optional[SessionFactory] = None,
        on_background_events_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        """Create the adapter without opening any connection.

        Args:
            cfg: Timeout, worker and header settings.
            callback_context: Runs completion callbacks; inline when omitted.
            session_factory: Builds the per-channel session (tests inject
                stubs here).
            on_background_events_finished: Called on a worker thread each time
                the deferred channel has no transfer left in flight.
        """
        self.cfg = cfg or HttpConfig()
        self.callback_context: CallbackContext = callback_context or (lambda fn: fn())
        self._session_factory: SessionFactory = session_factory or PrinterSession
        self.on_background_events_finished = on_background_events_finished
        self._lock = threading.Lock()
        self._interactive: Optional[_Channel] = None
        self._deferred: Optional[_Channel] = None
        self._background_in_flight = 0

    def __enter__(self) -> "PrinterRestAdapter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Port API
    def fetch_printer_info(self, key: PrinterKey) -> PendingRequest[bytes]:
        context = f"GET {key}"
        handle: PendingRequest[bytes] = PendingRequest(context, self.callback_context)
        if not is_valid_url(key):
            handle._fail(InvalidURLError(context=context))
            return handle

        channel = self._interactive_channel()
        _log.debug("Dispatching %s", context)
        self._dispatch(
            channel,
            handle,
            lambda: self._log_body(channel.session.get(key), context),
            require_body=True,
        )
        return handle

    def send_message(self, message: OutboundMessage) -> PendingRequest[None]:
        context = f"{message.method} {message.url}"
        handle: PendingRequest[None] = PendingRequest(context, self.callback_context)
        channel = self._interactive_channel()
        _log.debug("Dispatching %s (%s)", context, message.content_type)
        self._dispatch(
            channel,
            handle,
            lambda: channel.session.post(
                message.url, body=message.body, headers=message.headers
            ),
            keep_body=False,
        )
        return handle

    def send_message_in_background(self, message: OutboundMessage) -> None:
        channel = self._deferred_channel()
        with self._lock:
            self._background_in_flight += 1
        _log.debug("Queueing background %s %s", message.method, message.url)
        try:
            channel.executor.submit(self._run_background, channel.session, message)
        except RuntimeError as exc:
            _log.warning("Background channel rejected %s: %s", message.url, exc)
            self._background_done()

    def close(self, wait: bool = True) -> None:
        """Shut both channels down; the next call rebuilds them.

        Args:
            wait: Block until queued background sends have been carried out.
        """
        with self._lock:
            channels = [c for c in (self._interactive, self._deferred) if c is not None]
            self._interactive = None
            self._deferred = None
        for channel in channels:
            channel.close(wait)

    # ------------------------------------------------------------------
    # Helpers
    def _dispatch(
        self,
        channel: _Channel,
        handle: PendingRequest[Any],
        transfer: Callable[[], TransferOutcome],
        **options: bool,
    ) -> None:
        # A channel shut down by a concurrent close() rejects new work; report
        # that through the handle like every other failure.
        try:
            channel.executor.submit(handle._run, transfer, **options)
        except RuntimeError as exc:
            error = UnknownError(context=handle.context)
            error.__cause__ = exc
            handle._fail(error)

    def _interactive_channel(self) -> _Channel:
        with self._lock:
            if self._interactive is None:
                self._interactive = _Channel(
                    "interactive",
                    self._session_factory(self.cfg),
                    self.cfg.interactive_workers,
                )
            return self._interactive

    def _deferred_channel(self) -> _Channel:
        with self._lock:
            if self._deferred is None:
                self._deferred = _Channel(
                    "deferred",
                    self._session_factory(self.cfg),
                    self.cfg.background_workers,
                )
            return self._deferred

    def _run_background(self, session: PrinterSession, message: OutboundMessage) -> None:
        context = f"{message.method} {message.url}"
        try:
            outcome = session.post(message.url, body=message.body, headers=message.headers)
            classify_outcome(outcome, context=context)
        except PrinterError as exc:
            _log.warning("Background %s rejected: %s", context, exc)
        except Exception as exc:
            _log.warning("Background %s failed: %s", context, exc)
        else:
            _log.info("Background %s delivered", context)
        finally:
            self._background_done()

    def _background_done(self) -> None:
        with self._lock:
            self._background_in_flight -= 1
            idle = self._background_in_flight == 0
        if not idle:
            return
        _log.info("Background events finished.")
        hook = self.on_background_events_finished
        if hook is None:
            return
        try:
            hook()
        except Exception:
            _log.exception("Background events hook failed")

    @staticmethod
    def _log_body(outcome: TransferOutcome, context: str) -> TransferOutcome:
        if outcome.body and _log.isEnabledFor(logging.DEBUG):
            _log.debug("%s data: %s", context, outcome.body.decode("utf-8", "replace"))
        return outcome


__all__ = ["PendingRequest", "PrinterRestAdapter"]
