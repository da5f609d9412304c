"""Use case for reading a printer's info document."""

from __future__ import annotations

from dataclasses import dataclass

from littleprinter.domain.errors import InvalidURLError
from littleprinter.domain.messages import PrinterKey, is_valid_url
from littleprinter.domain.ports import PendingResult, PrinterPort


@dataclass
class FetchPrinterInfo:
    """Fetch the raw info payload for one printer through ``PrinterPort``.

    Decoding the payload into a printer record is left to the caller.
    """

    printer_port: PrinterPort

    def __call__(self, key: PrinterKey) -> PendingResult[bytes]:
        """Validate ``key`` and start the lookup.

        Raises:
            InvalidURLError: If ``key`` is not a well-formed URL. Nothing is
                dispatched in that case.
        """
        if not is_valid_url(key):
            raise InvalidURLError(context=f"GET {key}")
        return self.printer_port.fetch_printer_info(key)


__all__ = ["FetchPrinterInfo"]
