from __future__ import annotations

from typing import Any, Callable, List, Tuple

from littleprinter.app.callback_context import QueueCallbackContext, TkCallbackContext, call_inline


class _WidgetStub:
    def __init__(self) -> None:
        self.scheduled: List[Tuple[int, Callable[[], Any]]] = []
        self.cancelled: List[str] = []

    def after(self, delay_ms: int, fn: Callable[[], Any]) -> str:
        self.scheduled.append((delay_ms, fn))
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, after_id: str) -> None:
        self.cancelled.append(after_id)


def test_call_inline_runs_immediately() -> None:
    seen: List[int] = []

    call_inline(lambda: seen.append(1))

    assert seen == [1]


def test_queue_context_runs_callbacks_only_when_pumped() -> None:
    context = QueueCallbackContext()
    seen: List[int] = []

    context(lambda: seen.append(1))
    context(lambda: seen.append(2))
    context(lambda: seen.append(3))

    assert seen == []
    assert context.pending() == 3
    assert context.pump(limit=2) == 2
    assert seen == [1, 2]
    assert context.pump() == 1
    assert seen == [1, 2, 3]


def test_queue_context_keeps_pumping_after_failing_callback() -> None:
    context = QueueCallbackContext()
    seen: List[str] = []

    def _boom() -> None:
        raise RuntimeError("boom")

    context(_boom)
    context(lambda: seen.append("after"))

    assert context.pump() == 2
    assert seen == ["after"]


def test_tk_context_enqueues_without_touching_widget() -> None:
    widget = _WidgetStub()
    context = TkCallbackContext(widget, interval_ms=20)
    seen: List[int] = []

    assert len(widget.scheduled) == 1
    context(lambda: seen.append(1))

    assert len(widget.scheduled) == 1
    assert seen == []
    assert context.pending() == 1


def test_tk_context_tick_pumps_and_reschedules() -> None:
    widget = _WidgetStub()
    context = TkCallbackContext(widget, interval_ms=20)
    seen: List[int] = []
    context(lambda: seen.append(1))
    context(lambda: seen.append(2))

    delay, tick = widget.scheduled[0]
    tick()

    assert delay == 20
    assert seen == [1, 2]
    assert len(widget.scheduled) == 2
    assert widget.scheduled[1][0] == 20


def test_tk_context_stop_cancels_pending_tick() -> None:
    widget = _WidgetStub()
    context = TkCallbackContext(widget)

    context.stop()
    context.stop()

    assert widget.cancelled == ["after#1"]
