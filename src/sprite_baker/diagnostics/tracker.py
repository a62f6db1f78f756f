"""Timing and debug output for a bake."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from sprite_baker.data import Placement
from sprite_baker.errors import EncodeError


def save_placement_overlay(canvas: np.ndarray, placements: Sequence[Placement], output_dir: Path) -> Path:
    """Save an atlas copy with every placement outlined, for debugging."""

    path = output_dir / "placements.png"
    image = Image.fromarray(np.ascontiguousarray(canvas, dtype=np.uint8))
    draw = ImageDraw.Draw(image)
    for placement in placements:
        if placement.width == 0 or placement.height == 0:
            continue
        x0, y0, x1, y1 = placement.as_box()
        draw.rectangle((x0, y0, x1 - 1, y1 - 1), outline=(255, 0, 0, 255), width=1)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        image.save(path)
    except OSError as exc:
        raise EncodeError("Unable to write placement overlay", path) from exc
    return path


class Timer:
    """Simple context timer for profiling blocks."""

    def __init__(self) -> None:
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, *_exc: object) -> None:
        self.elapsed = time.perf_counter() - self.start
