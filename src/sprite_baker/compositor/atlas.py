"""Atlas compositing: background fill and straight-overwrite blits."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple, Union

import numpy as np

from sprite_baker.data import Placement, SourceImage
from sprite_baker.io import encode_png


def composite(
    images: Sequence[SourceImage],
    placements: Sequence[Placement],
    canvas_width: int,
    canvas_height: int,
    background: Tuple[int, int, int, int] = (0, 0, 0, 0),
) -> np.ndarray:
    """Copy every placed image into a background-filled RGBA canvas.

    No blending is applied; placements are disjoint and inside the canvas.
    """

    canvas = np.empty((canvas_height, canvas_width, 4), dtype=np.uint8)
    canvas[...] = np.asarray(background, dtype=np.uint8)
    for placement in placements:
        x0, y0, x1, y1 = placement.as_box()
        canvas[y0:y1, x0:x1] = images[placement.id].pixels
    return canvas


def write_atlas(path: Union[str, Path], canvas: np.ndarray) -> None:
    """Encode the finished canvas to ``path`` as PNG."""

    encode_png(path, canvas)
