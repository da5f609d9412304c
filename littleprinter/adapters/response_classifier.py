"""Map raw transfer outcomes onto success values or printer errors.

Shared by the fetch and send paths; send callers ignore the returned body.
"""

from __future__ import annotations

from typing import Optional

from littleprinter.domain.errors import (
    HttpErrorCodeError,
    NoDataInResponseError,
    PrinterNotFoundError,
    UnknownError,
)
from littleprinter.domain.messages import TransferOutcome

HTTP_OK = 200
HTTP_NOT_FOUND = 404


def classify_outcome(
    outcome: TransferOutcome,
    *,
    require_body: bool = False,
    context: Optional[str] = None,
) -> Optional[bytes]:
    """Return the response body on success, raise on failure.

    Args:
        outcome: Result of one HTTP exchange.
        require_body: Fail with ``NoDataInResponseError`` on an empty 200 body
            (used on the fetch path).
        context: Optional ``"METHOD url"`` label attached to raised errors.

    Returns:
        The body bytes (possibly ``None`` when ``require_body`` is false).

    Raises:
        BaseException: The transport error carried by ``outcome``, unchanged.
        UnknownError: No HTTP status was observable.
        NoDataInResponseError: 200 without a body while ``require_body``.
        PrinterNotFoundError: HTTP 404.
        HttpErrorCodeError: Any other HTTP status.
    """
    if outcome.error is not None:
        raise outcome.error
    status = outcome.status
    if status is None:
        raise UnknownError(context=context)
    if status == HTTP_OK:
        if require_body and not outcome.body:
            raise NoDataInResponseError(context=context)
        return outcome.body
    if status == HTTP_NOT_FOUND:
        raise PrinterNotFoundError(status=status, context=context)
    raise HttpErrorCodeError(status, context=context)


__all__ = ["HTTP_NOT_FOUND", "HTTP_OK", "classify_outcome"]
