"""Adapter and use-case wiring for a printer client runtime.

This module owns lazy construction of the REST adapter and of the use cases
that depend on it. Presentation code creates one controller, calls
``ensure_ready`` and then uses ``uc_fetch_info`` / ``uc_send``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..adapters.http_client import HttpConfig
from ..adapters.message_builder import build_message
from ..adapters.printer_rest import PrinterRestAdapter
from ..domain.ports import CallbackContext
from ..usecases.fetch_printer_info import FetchPrinterInfo
from ..usecases.send_message import SendMessage
from .callback_context import call_inline


class AppController:
    """Create and cache the printer adapter and its use cases."""

    def __init__(
        self,
        cfg: Optional[HttpConfig] = None,
        *,
        callback_context: Optional[CallbackContext] = None,
        on_background_events_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        """Initialize controller with lazily built dependencies.

        Args:
            cfg: HTTP settings passed to the adapter.
            callback_context: Where completion callbacks run (UI thread).
            on_background_events_finished: Hook for deferred channel drains.
        """
        self._log = logging.getLogger(__name__)
        self.cfg = cfg or HttpConfig()
        self.callback_context = callback_context or call_inline
        self.on_background_events_finished = on_background_events_finished
        self._printer_adapter: Optional[PrinterRestAdapter] = None
        self.uc_fetch_info: Optional[FetchPrinterInfo] = None
        self.uc_send: Optional[SendMessage] = None

    @property
    def printer_adapter(self) -> Optional[PrinterRestAdapter]:
        """Return the cached adapter, if built."""
        return self._printer_adapter

    def ensure_ready(self) -> bool:
        """Build the adapter and use cases on first call."""
        if self._printer_adapter is not None:
            return True
        self._printer_adapter = PrinterRestAdapter(
            self.cfg,
            callback_context=self.callback_context,
            on_background_events_finished=self.on_background_events_finished,
        )
        self.uc_fetch_info = FetchPrinterInfo(self._printer_adapter)
        self.uc_send = SendMessage(self._printer_adapter, build_message)
        self._log.debug("Printer adapter ready (timeout=%s)", self.cfg.request_timeout_s)
        return True

    def reset(self) -> None:
        """Close the adapter and drop cached use cases.

        Side Effects:
            Waits for queued background sends before the channels close.
        """
        adapter = self._printer_adapter
        self._printer_adapter = None
        self.uc_fetch_info = None
        self.uc_send = None
        if adapter is not None:
            adapter.close()

    close = reset


__all__ = ["AppController"]
