from __future__ import annotations

import pytest
from requests import exceptions as req_exc

from littleprinter.adapters.response_classifier import classify_outcome
from littleprinter.domain.errors import (
    HttpErrorCodeError,
    NoDataInResponseError,
    PrinterNotFoundError,
    UnknownError,
)
from littleprinter.domain.messages import TransferOutcome


def test_ok_with_body_returns_exact_body_on_fetch() -> None:
    outcome = TransferOutcome(status=200, body=b'{"name": "desk"}')

    assert classify_outcome(outcome, require_body=True) == b'{"name": "desk"}'


@pytest.mark.parametrize("body", [None, b""])
def test_ok_without_body_fails_on_fetch(body) -> None:
    with pytest.raises(NoDataInResponseError):
        classify_outcome(TransferOutcome(status=200, body=body), require_body=True)


def test_ok_without_body_succeeds_on_send() -> None:
    assert classify_outcome(TransferOutcome(status=200)) is None


@pytest.mark.parametrize("body", [None, b"", b"gone", b'{"error": "nope"}'])
def test_not_found_ignores_body(body) -> None:
    with pytest.raises(PrinterNotFoundError):
        classify_outcome(TransferOutcome(status=404, body=body), require_body=True)


@pytest.mark.parametrize("status", [201, 400, 500, 503])
def test_other_statuses_carry_exact_code(status: int) -> None:
    with pytest.raises(HttpErrorCodeError) as exc_info:
        classify_outcome(TransferOutcome(status=status, body=b"x"), context="GET https://p")

    assert exc_info.value.status == status
    assert exc_info.value.context == "GET https://p"


def test_transport_error_is_raised_unchanged() -> None:
    err = req_exc.ConnectionError("refused")

    with pytest.raises(req_exc.ConnectionError) as exc_info:
        classify_outcome(TransferOutcome(error=err, status=200, body=b"x"))

    assert exc_info.value is err


def test_missing_status_is_unknown_error() -> None:
    with pytest.raises(UnknownError):
        classify_outcome(TransferOutcome(body=b"not http"))
