"""PNG encoding for image message content.

Dependencies:
    - ``Pillow`` for decoding arbitrary input images and re-encoding as PNG.

Call context:
    - Used by ``littleprinter.adapters.message_builder.build_message`` for the
      image content variant. Tests may substitute another encoder callable.
"""

from __future__ import annotations

import io
from typing import Union

from PIL import Image, UnidentifiedImageError

from littleprinter.domain.errors import InvalidDataError


def encode_png(image: Union[bytes, Image.Image]) -> bytes:
    """Return PNG bytes for ``image``.

    Args:
        image: Encoded image bytes in any Pillow-readable format, or an
            already-decoded ``PIL.Image.Image``.

    Returns:
        PNG-encoded bytes.

    Raises:
        InvalidDataError: If the input cannot be decoded or written as PNG.
    """
    try:
        if isinstance(image, (bytes, bytearray, memoryview)):
            if not image:
                raise InvalidDataError()
            with Image.open(io.BytesIO(bytes(image))) as decoded:
                decoded.load()
                return _to_png(decoded)
        if isinstance(image, Image.Image):
            return _to_png(image)
    # Pillow decoders also signal corrupt chunks and short reads with
    # SyntaxError and EOFError.
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
        SyntaxError,
        EOFError,
    ) as exc:
        raise InvalidDataError() from exc
    raise InvalidDataError()


def _to_png(image: Image.Image) -> bytes:
    # PNG cannot store CMYK or YCbCr; convert to RGB first.
    if image.mode in ("CMYK", "YCbCr"):
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


__all__ = ["encode_png"]
