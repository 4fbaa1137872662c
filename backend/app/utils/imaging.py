"""Decode uploaded still images into RGBA frames."""

from __future__ import annotations

import base64
import binascii
import io

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from app.engine.errors import InvalidFrameError


def decode_image(data: bytes, max_side: int | None = None) -> NDArray[np.uint8]:
    """PNG/JPEG/etc. bytes → H×W×4 uint8 array.

    The header size is checked against ``max_side`` before any pixel data is
    decoded, so oversized uploads are rejected without allocating the frame.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
            if max_side is not None and max(width, height) > max_side:
                raise InvalidFrameError(f"frame {width}x{height} exceeds {max_side}px")
            return np.array(img.convert("RGBA"), dtype=np.uint8)
    except Image.DecompressionBombError as e:
        raise InvalidFrameError(f"image is too large to decode: {e}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidFrameError(f"could not decode image: {e}") from e


def decode_base64_image(encoded: str, max_side: int | None = None) -> NDArray[np.uint8]:
    """Accepts bare base64 or a ``data:image/...;base64,`` URL."""
    if encoded.startswith("data:"):
        _, _, encoded = encoded.partition(",")
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidFrameError(f"image is not valid base64: {e}") from e
    return decode_image(raw, max_side)


def encode_png_base64(frame: NDArray[np.uint8]) -> str:
    buf = io.BytesIO()
    Image.fromarray(frame).save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")
