"""Domain package exports for printer client value objects and errors."""

from .errors import (
    HttpErrorCodeError,
    InvalidDataError,
    InvalidURLError,
    NoDataInResponseError,
    PrinterError,
    PrinterNotFoundError,
    UnknownError,
)
from .messages import (
    HtmlContent,
    ImageContent,
    MessageContent,
    OutboundMessage,
    PrinterKey,
    SenderIdentity,
    TextContent,
    TransferOutcome,
)

__all__ = [
    "HtmlContent",
    "HttpErrorCodeError",
    "ImageContent",
    "InvalidDataError",
    "InvalidURLError",
    "MessageContent",
    "NoDataInResponseError",
    "OutboundMessage",
    "PrinterError",
    "PrinterKey",
    "PrinterNotFoundError",
    "SenderIdentity",
    "TextContent",
    "TransferOutcome",
    "UnknownError",
]
