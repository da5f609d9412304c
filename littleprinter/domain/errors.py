"""Domain-level error types for printer client failures.

Every failure the client can classify on its own is one of the subclasses of
:class:`PrinterError` below. The set is closed: presentation code may switch on
``kind`` and show ``message`` without further mapping.

Transport exceptions raised by ``requests`` (DNS, refused connections, TLS,
timeouts) are deliberately *not* wrapped and reach callers unchanged.
"""

from __future__ import annotations

from typing import Optional


class PrinterError(RuntimeError):
    """Base class for classified printer client failures."""

    kind: str = "UNKNOWN_ERROR"
    description: str = "Something happened that isn't handled. Sorry about that."

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status: Optional[int] = None,
        context: Optional[str] = None,
    ) -> None:
        text = message or self.description
        super().__init__(text)
        self.message = text
        self.status = status
        self.context = context


class UnknownError(PrinterError):
    """No classifiable status or response signal was available."""


class InvalidURLError(PrinterError):
    """Printer key (plus sender) does not form a valid URL."""

    kind = "INVALID_URL"
    description = "Unable to create a valid URL with this key"


class InvalidDataError(PrinterError):
    """Message content could not be encoded into request bytes."""

    kind = "INVALID_DATA"
    description = "Unable to create data with this message"


class NoDataInResponseError(PrinterError):
    """HTTP 200 on a fetch, but the body was absent or empty."""

    kind = "NO_DATA_IN_RESPONSE"
    description = "There was no data in the response"


class PrinterNotFoundError(PrinterError):
    """HTTP 404: the printer key is unknown to the server."""

    kind = "PRINTER_NOT_FOUND"
    description = "This printer key cannot be found, it may have been removed"


class HttpErrorCodeError(PrinterError):
    """Any HTTP status outside of 200 and 404."""

    kind = "HTTP_ERROR_CODE"

    def __init__(self, status: int, *, context: Optional[str] = None) -> None:
        super().__init__(
            f"Server responded with error code {status}",
            status=status,
            context=context,
        )


__all__ = [
    "HttpErrorCodeError",
    "InvalidDataError",
    "InvalidURLError",
    "NoDataInResponseError",
    "PrinterError",
    "PrinterNotFoundError",
    "UnknownError",
]
