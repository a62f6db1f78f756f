"""Content trimming of fully transparent borders."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from sprite_baker.data import SourceImage
from sprite_baker.errors import TrimError


def alpha_bounds(pixels: np.ndarray) -> Optional[Tuple[int, int, int, int]]:
    """Return the (x0, y0, x1, y1) box of pixels with non-zero alpha.

    ``None`` means the image is fully transparent.
    """

    mask = pixels[..., 3] != 0
    rows = np.flatnonzero(mask.any(axis=1))
    if rows.size == 0:
        return None
    cols = np.flatnonzero(mask.any(axis=0))
    return (int(cols[0]), int(rows[0]), int(cols[-1]) + 1, int(rows[-1]) + 1)


def trim_image(image: SourceImage) -> SourceImage:
    """Shrink an image to the tight bounding box of its visible pixels."""

    bounds = alpha_bounds(image.pixels)
    if bounds is None:
        raise TrimError("Unable to trim a fully transparent image", image.path)
    x0, y0, x1, y1 = bounds
    kept = np.array(image.pixels[y0:y1, x0:x1], dtype=np.uint8, copy=True)
    offset_x, offset_y = image.trim_offset
    return SourceImage(
        path=image.path,
        pixels=kept,
        source_size=image.source_size,
        trim_offset=(offset_x + x0, offset_y + y0),
    )
