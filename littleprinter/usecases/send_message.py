"""Use case for composing and delivering one printer message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from littleprinter.domain.messages import MessageContent, PrinterKey, SenderIdentity
from littleprinter.domain.ports import MessageBuilder, PendingResult, PrinterPort


@dataclass
class SendMessage:
    """Build a message and hand it to the interactive or deferred channel.

    ``build`` is injected by the composition layer (normally
    ``littleprinter.adapters.message_builder.build_message``).
    """

    printer_port: PrinterPort
    build: MessageBuilder

    def __call__(
        self,
        content: MessageContent,
        *,
        key: PrinterKey,
        sender: SenderIdentity,
        background: bool = False,
    ) -> Optional[PendingResult[None]]:
        """Send ``content`` to ``key`` on behalf of ``sender``.

        Args:
            content: Text, HTML, or image content variant.
            key: Printer key (inbox URL).
            sender: Display name for the ``from`` parameter.
            background: Use the fire-and-forget deferred channel.

        Returns:
            The pending request handle, or ``None`` for background sends.

        Raises:
            PrinterError: If the message cannot be built (``InvalidDataError``
                or ``InvalidURLError``); nothing is sent in that case.
        """
        message = self.build(content, key, sender)
        if background:
            self.printer_port.send_message_in_background(message)
            return None
        return self.printer_port.send_message(message)


__all__ = ["SendMessage"]
