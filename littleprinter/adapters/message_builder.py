"""Build outbound printer messages from content variants.

The table in ``CONTENT_TYPES`` is the single source of truth for which header
each content variant is sent with. Building is pure: no network access, no
shared state.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Type, Union

from PIL import Image

from littleprinter.domain.errors import InvalidDataError, InvalidURLError
from littleprinter.domain.messages import (
    HtmlContent,
    ImageContent,
    MessageContent,
    OutboundMessage,
    PrinterKey,
    SenderIdentity,
    TextContent,
    compose_message_url,
    is_valid_url,
)

from .image_codec import encode_png

ImageEncoder = Callable[[Union[bytes, Image.Image]], bytes]

# The image label does not match the PNG body. The printer server has always
# received it this way, so the label stays until the server side is confirmed.
CONTENT_TYPES: Dict[Type[object], str] = {
    TextContent: "text/plain",
    HtmlContent: "text/html",
    ImageContent: "image/jpeg",
}

_log = logging.getLogger(__name__)


def build_message(
    content: MessageContent,
    key: PrinterKey,
    sender: SenderIdentity,
    *,
    image_encoder: ImageEncoder = encode_png,
) -> OutboundMessage:
    """Create the POST request for ``content`` addressed to ``key``.

    Args:
        content: Text, HTML, or image content variant.
        key: Printer key (full inbox URL).
        sender: Display name sent in the ``from`` query parameter.
        image_encoder: Encoder used for image content, PNG by default.

    Returns:
        Immutable ``OutboundMessage`` ready for dispatch.

    Raises:
        InvalidDataError: If the content cannot be encoded to bytes.
        InvalidURLError: If ``key`` plus the escaped sender is not a valid URL.
    """
    content_type = CONTENT_TYPES.get(type(content))
    if content_type is None:
        raise InvalidDataError(context=f"unsupported content {type(content).__name__}")
    body = _encode_body(content, image_encoder)

    url = compose_message_url(key, sender)
    if not is_valid_url(url):
        raise InvalidURLError(context=f"POST {url}")

    _log.debug("Built %s message for %s (%d bytes)", content_type, url, len(body))
    return OutboundMessage(url=url, content_type=content_type, body=body)


def _encode_body(content: MessageContent, image_encoder: ImageEncoder) -> bytes:
    if isinstance(content, TextContent):
        return _encode_utf8(content.text)
    if isinstance(content, HtmlContent):
        return _encode_utf8(content.html)
    return image_encoder(content.image)


def _encode_utf8(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except (UnicodeEncodeError, AttributeError) as exc:
        raise InvalidDataError() from exc


__all__ = ["CONTENT_TYPES", "build_message"]
