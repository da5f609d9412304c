"""Shared HTTP transport utilities for the printer REST adapter.

This module provides a thin wrapper around ``requests.Session`` so each
delivery channel performs exactly one exchange per call and reports the raw
outcome without interpreting status codes.

Dependencies:
    - ``requests`` for network I/O.
    - ``littleprinter.domain.messages.TransferOutcome`` for the raw result.

Call context:
    - Constructed lazily by ``littleprinter.adapters.printer_rest`` (one
      session per channel).
    - Status classification happens in ``response_classifier``, never here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import requests
from requests import exceptions as req_exc

from littleprinter.domain.messages import TransferOutcome


@dataclass
class HttpConfig:
    """Timeout and worker configuration for printer HTTP calls.

    Attributes:
        request_timeout_s: Per-request timeout in seconds. ``None`` keeps the
            transport default.
        interactive_workers: Thread count of the interactive channel.
        background_workers: Thread count of the deferred channel.
        user_agent: Optional ``User-Agent`` header value.
    """
    request_timeout_s: Optional[float] = None
    interactive_workers: int = 4
    background_workers: int = 2
    user_agent: Optional[str] = None


class PrinterSession:
    """Single-attempt requests wrapper returning ``TransferOutcome`` values.

    There is no retry loop: each call maps to exactly one HTTP exchange.
    Transport exceptions are captured on the outcome so the classifier can
    surface them unchanged.
    """

    def __init__(self, cfg: HttpConfig) -> None:
        """Create a session.

        Args:
            cfg: Shared timeout and header settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.cfg.user_agent:
            headers["User-Agent"] = self.cfg.user_agent
        if extra:
            headers.update(extra)
        return headers

    def get(self, url: str) -> TransferOutcome:
        """Send a GET request and capture its outcome.

        Args:
            url: Absolute endpoint URL.

        Returns:
            ``TransferOutcome`` with status/body, or the transport error.
        """
        try:
            resp = self.session.get(
                url,
                headers=self._headers(),
                timeout=self.cfg.request_timeout_s,
            )
        except req_exc.RequestException as exc:
            return TransferOutcome(error=exc)
        return _outcome_from_response(resp)

    def post(
        self,
        url: str,
        *,
        body: bytes,
        headers: Optional[Dict[str, str]] = None,
    ) -> TransferOutcome:
        """Send a POST request with a raw body and capture its outcome.

        Args:
            url: Absolute endpoint URL including query string.
            body: Raw request body bytes.
            headers: Request headers (``Content-Type`` at minimum).

        Returns:
            ``TransferOutcome`` with status/body, or the transport error.
        """
        try:
            resp = self.session.post(
                url,
                data=body,
                headers=self._headers(headers),
                timeout=self.cfg.request_timeout_s,
            )
        except req_exc.RequestException as exc:
            return TransferOutcome(error=exc)
        return _outcome_from_response(resp)

    def close(self) -> None:
        self.session.close()


def _outcome_from_response(resp: object) -> TransferOutcome:
    status = getattr(resp, "status_code", None)
    if not isinstance(status, int):
        return TransferOutcome()
    content = getattr(resp, "content", None)
    body = bytes(content) if content else None
    return TransferOutcome(status=status, body=body)


__all__ = ["HttpConfig", "PrinterSession"]
