"""Skyline bin packing of image rectangles into a fixed-size atlas."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from sprite_baker.data import Placement, PlacementRequest, SourceImage
from sprite_baker.errors import PackError


def build_requests(images: Sequence[SourceImage], padding: int) -> List[PlacementRequest]:
    """Create one padded request per image, keyed by its input position."""

    return [
        PlacementRequest(id=index, width=image.width + padding * 2, height=image.height + padding * 2)
        for index, image in enumerate(images)
    ]


def placement_order(requests: Sequence[PlacementRequest]) -> List[PlacementRequest]:
    """Tallest first, then widest, then input position."""

    return sorted(requests, key=lambda rect: (-rect.height, -rect.width, rect.id))


class Skyline:
    """Occupied height of every column across the bin width."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.heights = np.zeros(width, dtype=np.int64)

    def find_position(self, rect_width: int, rect_height: int) -> Optional[Tuple[int, int]]:
        """Return the bottom-left position for a rectangle, or ``None``.

        Candidates are ranked by resting height, then by the area wasted
        between the rectangle and the skyline beneath it, then by x.
        """

        if rect_width > self.width or rect_height > self.height:
            return None
        windows = sliding_window_view(self.heights, rect_width)
        ys = windows.max(axis=1)
        waste = ys * rect_width - windows.sum(axis=1)
        candidates = np.flatnonzero(ys + rect_height <= self.height)
        if candidates.size == 0:
            return None
        xs = candidates
        best = np.lexsort((xs, waste[xs], ys[xs]))[0]
        x = int(xs[best])
        return (x, int(ys[x]))

    def place(self, x: int, y: int, rect_width: int, rect_height: int) -> None:
        self.heights[x : x + rect_width] = y + rect_height


def pack(images: Sequence[SourceImage], canvas_width: int, canvas_height: int, padding: int = 0) -> List[Placement]:
    """Place every image inside the canvas or fail.

    Returns placements in input order with the padding stripped back out, so
    each one describes the image's true footprint in the atlas.
    """

    if canvas_width <= 0 or canvas_height <= 0:
        raise PackError(f"Invalid atlas size {canvas_width}x{canvas_height}")
    if padding < 0:
        raise PackError(f"Invalid padding {padding}")

    requests = build_requests(images, padding)
    skyline = Skyline(canvas_width, canvas_height)
    positions = {}
    for rect in placement_order(requests):
        if rect.width == 0 or rect.height == 0:
            positions[rect.id] = (0, 0)
            continue
        position = skyline.find_position(rect.width, rect.height)
        if position is None:
            raise PackError(
                "insufficient space: unable to pack all images, consider a bigger output image",
                images[rect.id].path,
            )
        skyline.place(position[0], position[1], rect.width, rect.height)
        positions[rect.id] = position

    placements = []
    for rect in requests:
        x, y = positions[rect.id]
        placements.append(
            Placement(
                id=rect.id,
                x=x + padding,
                y=y + padding,
                width=rect.width - padding * 2,
                height=rect.height - padding * 2,
            )
        )
    return placements
