"""Translate printer client failures into user-facing UseCaseError instances."""

from __future__ import annotations

from concurrent.futures import CancelledError

from requests import exceptions as req_exc

from littleprinter.domain.errors import PrinterError, UnknownError
from littleprinter.domain.ports import UseCaseError


def map_printer_error(exc: BaseException) -> UseCaseError:
    """Map client exceptions to stable UseCaseError codes.

    Args:
        exc: Failure raised synchronously or reported by a pending request.

    Returns:
        UseCaseError carrying a stable code and the text to show the user.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, PrinterError):
        return UseCaseError(exc.kind, exc.message)
    if isinstance(exc, CancelledError):
        return UseCaseError("REQUEST_CANCELLED", "Request was cancelled.")
    if isinstance(exc, req_exc.Timeout):
        return UseCaseError("REQUEST_TIMEOUT", _compose("Request timed out", exc))
    if isinstance(exc, req_exc.ConnectionError):
        return UseCaseError("CONNECTION_FAILED", _compose("Could not reach the printer", exc))
    if isinstance(exc, req_exc.RequestException):
        return UseCaseError("REQUEST_FAILED", _compose("Request failed", exc))
    return UseCaseError(UnknownError.kind, str(exc) or UnknownError.description)


def describe_error(exc: BaseException) -> str:
    """Return the message a presentation layer should display for ``exc``."""
    return map_printer_error(exc).message


def _compose(base: str, exc: BaseException) -> str:
    detail = str(exc).strip()
    if detail:
        return f"{base}: {detail}"
    return f"{base}."


__all__ = ["describe_error", "map_printer_error"]
