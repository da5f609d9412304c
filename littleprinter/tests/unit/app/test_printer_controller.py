from __future__ import annotations

from littleprinter.adapters.http_client import HttpConfig
from littleprinter.adapters.message_builder import build_message
from littleprinter.app.callback_context import QueueCallbackContext
from littleprinter.app.controller import AppController


def test_controller_ensure_ready_wires_usecases() -> None:
    context = QueueCallbackContext()
    controller = AppController(HttpConfig(request_timeout_s=3), callback_context=context)

    assert controller.printer_adapter is None
    assert controller.ensure_ready() is True

    adapter = controller.printer_adapter
    assert adapter is not None
    assert adapter.callback_context is context
    assert adapter.cfg.request_timeout_s == 3
    assert controller.uc_fetch_info is not None
    assert controller.uc_fetch_info.printer_port is adapter
    assert controller.uc_send is not None
    assert controller.uc_send.printer_port is adapter
    assert controller.uc_send.build is build_message

    assert controller.ensure_ready() is True
    assert controller.printer_adapter is adapter


def test_controller_reset_drops_cached_objects() -> None:
    controller = AppController()
    controller.ensure_ready()

    controller.reset()

    assert controller.printer_adapter is None
    assert controller.uc_fetch_info is None
    assert controller.uc_send is None
