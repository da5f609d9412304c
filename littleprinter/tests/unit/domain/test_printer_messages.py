from __future__ import annotations

import pytest

from littleprinter.domain.errors import (
    HttpErrorCodeError,
    InvalidDataError,
    InvalidURLError,
    NoDataInResponseError,
    PrinterError,
    PrinterNotFoundError,
    UnknownError,
)
from littleprinter.domain.messages import (
    OutboundMessage,
    compose_message_url,
    escape_sender,
    is_valid_url,
)


@pytest.mark.parametrize(
    "value",
    [
        "https://example.com/in",
        "http://printer.local:8080/key/abc",
        "https://example.com/in?existing=1",
    ],
)
def test_is_valid_url_accepts_http_urls(value: str) -> None:
    assert is_valid_url(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not a url",
        "example.com/in",
        "ftp://example.com/in",
        "https://",
        "https://exa mple.com/in",
        "https://example.com:99999/in",
        "https://[::1/in",
        None,
    ],
)
def test_is_valid_url_rejects_malformed_values(value: object) -> None:
    assert is_valid_url(value) is False


def test_escape_sender_escapes_spaces_and_reserved_characters() -> None:
    assert escape_sender("Bob Smith") == "Bob%20Smith"
    assert escape_sender("a/b?c&d=e#f") == "a%2Fb%3Fc%26d%3De%23f"


def test_escape_sender_falls_back_to_anon() -> None:
    assert escape_sender("") == "anon"
    assert escape_sender("\ud800") == "anon"


def test_compose_message_url_appends_from_parameter() -> None:
    url = compose_message_url("https://example.com/in", "Zoë")

    assert url == "https://example.com/in?from=Zo%C3%AB"


def test_outbound_message_headers_and_immutability() -> None:
    message = OutboundMessage(url="https://example.com/in?from=a", content_type="text/html", body=b"<p>")

    assert message.method == "POST"
    assert message.headers == {"Content-Type": "text/html"}
    with pytest.raises(AttributeError):
        message.body = b"changed"  # type: ignore[misc]


@pytest.mark.parametrize(
    "error, text",
    [
        (UnknownError(), "Something happened that isn't handled. Sorry about that."),
        (InvalidURLError(), "Unable to create a valid URL with this key"),
        (InvalidDataError(), "Unable to create data with this message"),
        (NoDataInResponseError(), "There was no data in the response"),
        (PrinterNotFoundError(), "This printer key cannot be found, it may have been removed"),
        (HttpErrorCodeError(503), "Server responded with error code 503"),
    ],
)
def test_printer_errors_carry_fixed_descriptions(error: PrinterError, text: str) -> None:
    assert str(error) == text
    assert error.message == text
    assert isinstance(error, PrinterError)


def test_http_error_code_keeps_status_and_context() -> None:
    err = HttpErrorCodeError(418, context="POST https://example.com/in")

    assert err.status == 418
    assert err.kind == "HTTP_ERROR_CODE"
    assert err.context == "POST https://example.com/in"
