"""Image codec boundary: decoding, resampling and PNG encoding."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from sprite_baker.errors import DecodeError, EncodeError, ScaleError

PathLike = Union[str, Path]

_WIDE_GRAY_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N")


def _to_rgba(image: Image.Image) -> Image.Image:
    """Convert to 8-bit RGBA, keeping the high byte of 16-bit gray samples."""

    if image.mode in _WIDE_GRAY_MODES:
        wide = np.asarray(image).astype(np.int64)
        image = Image.fromarray((np.clip(wide, 0, 0xFFFF) >> 8).astype(np.uint8))
    return image.convert("RGBA")


def decode_image(path: PathLike) -> np.ndarray:
    """Decode an image file into an RGBA uint8 array of shape (h, w, 4).

    Sources without an alpha channel come back fully opaque.
    """

    try:
        with Image.open(path) as image:
            image.load()
            rgba = _to_rgba(image)
    except FileNotFoundError as exc:
        raise DecodeError("can't fopen", path) from exc
    except UnidentifiedImageError as exc:
        raise DecodeError("unknown image type", path) from exc
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"corrupt image ({exc})", path) from exc
    return np.array(rgba, dtype=np.uint8)


def scaled_size(width: int, height: int, scale_percent: int) -> Tuple[int, int]:
    """Return the rounded size of an image scaled by a percentage."""

    factor = scale_percent / 100.0
    return (int(math.floor(width * factor + 0.5)), int(math.floor(height * factor + 0.5)))


def resample_image(pixels: np.ndarray, new_width: int, new_height: int) -> np.ndarray:
    """Resample RGBA pixels to a new size with a Lanczos filter."""

    if new_width <= 0 or new_height <= 0:
        raise ScaleError(f"Failed to scale image to {new_width}x{new_height}")
    try:
        image = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
        resized = image.resize((new_width, new_height), resample=Image.LANCZOS)
    except (OSError, ValueError) as exc:
        raise ScaleError(f"Failed to scale image ({exc})") from exc
    return np.array(resized, dtype=np.uint8)


def encode_png(path: PathLike, pixels: np.ndarray) -> None:
    """Write RGBA pixels to ``path`` as PNG regardless of the extension."""

    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError("Unable to write output image", path) from exc
