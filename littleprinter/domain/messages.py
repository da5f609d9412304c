"""Value objects exchanged between the message builder and the transport.

Nothing in this module performs I/O. Printer keys and sender names come from an
external printer directory; here they are only validated and escaped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union
from urllib.parse import quote, urlsplit

from PIL import Image

PrinterKey = str
SenderIdentity = str

ANONYMOUS_SENDER = "anon"
SENDER_QUERY_PARAM = "from"
_ALLOWED_SCHEMES = ("http", "https")


def is_valid_url(value: object) -> bool:
    """Return ``True`` when ``value`` is an absolute http(s) URL.

    Rejects empty strings, embedded whitespace or control characters,
    unsupported schemes, missing hosts and out-of-range ports.
    """
    if not isinstance(value, str) or not value:
        return False
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        return False
    try:
        parts = urlsplit(value)
        # ``port`` raises ValueError for non-numeric or out-of-range ports.
        parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in _ALLOWED_SCHEMES:
        return False
    return bool(parts.hostname)


def escape_sender(sender: SenderIdentity) -> str:
    """Percent-escape a sender name with no reserved character left as-is.

    Falls back to ``anon`` when the name is empty or cannot be encoded.
    """
    try:
        escaped = quote(sender or "", safe="")
    except UnicodeEncodeError:
        return ANONYMOUS_SENDER
    return escaped or ANONYMOUS_SENDER


def compose_message_url(key: PrinterKey, sender: SenderIdentity) -> str:
    """Return ``key?from=<escaped sender>`` without validating it."""
    return f"{key}?{SENDER_QUERY_PARAM}={escape_sender(sender)}"


# ---- Content variants ----
@dataclass(frozen=True)
class TextContent:
    text: str


@dataclass(frozen=True)
class HtmlContent:
    html: str


@dataclass(frozen=True)
class ImageContent:
    """Image payload, either already-encoded bytes or a Pillow image."""

    image: Union[bytes, Image.Image]


MessageContent = Union[TextContent, HtmlContent, ImageContent]


@dataclass(frozen=True)
class OutboundMessage:
    """Fully formed POST request addressed to one printer.

    Attributes:
        url: Printer key with the ``from`` query parameter appended.
        content_type: Value of the ``Content-Type`` header.
        body: Raw request body.
        method: HTTP method, always ``POST`` for messages.
    """

    url: str
    content_type: str
    body: bytes
    method: str = "POST"

    @property
    def headers(self) -> Dict[str, str]:
        return {"Content-Type": self.content_type}


@dataclass(frozen=True)
class TransferOutcome:
    """Raw result of one HTTP exchange, consumed by the response classifier.

    Attributes:
        error: Transport exception, if the exchange failed before a response.
        status: HTTP status code, ``None`` when no HTTP response is available.
        body: Response body bytes, if any.
    """

    error: Optional[BaseException] = None
    status: Optional[int] = None
    body: Optional[bytes] = None


__all__ = [
    "ANONYMOUS_SENDER",
    "HtmlContent",
    "ImageContent",
    "MessageContent",
    "OutboundMessage",
    "PrinterKey",
    "SenderIdentity",
    "TextContent",
    "TransferOutcome",
    "compose_message_url",
    "escape_sender",
    "is_valid_url",
]
