from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, TypeVar

from .messages import MessageContent, OutboundMessage, PrinterKey, SenderIdentity

T = TypeVar("T", covariant=True)

# Receives a zero-argument callable and runs it on the designated callback
# context (UI thread, event queue, or inline).
CallbackContext = Callable[[Callable[[], None]], Any]

# Turns content, key and sender into a ready request; raises PrinterError.
MessageBuilder = Callable[[MessageContent, PrinterKey, SenderIdentity], OutboundMessage]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class PendingResult(Protocol[T]):
    """Handle for an in-flight printer request."""

    def add_done_callback(self, fn: Callable[[Any], None]) -> None: ...
    def result(self, timeout: Optional[float] = None) -> T: ...
    def exception(self, timeout: Optional[float] = None) -> Optional[BaseException]: ...
    def done(self) -> bool: ...
    def cancelled(self) -> bool: ...
    def cancel(self) -> bool: ...


class PrinterPort(Protocol):
    """Info lookup and message delivery against the printer service."""

    def fetch_printer_info(self, key: PrinterKey) -> PendingResult[bytes]: ...
    def send_message(self, message: OutboundMessage) -> PendingResult[None]: ...
    def send_message_in_background(self, message: OutboundMessage) -> None: ...
