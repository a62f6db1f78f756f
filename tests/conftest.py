from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from sprite_baker.data import SourceImage


@pytest.fixture
def make_source():
    def _make(width: int, height: int, color=(255, 255, 255, 255), name: str = "img.png") -> SourceImage:
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[...] = color
        return SourceImage(path=Path(name), pixels=pixels, source_size=(width, height))

    return _make


@pytest.fixture
def write_png(tmp_path):
    def _write(name: str, width: int, height: int, color=(255, 0, 0, 255), mode: str = "RGBA") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, (width, height), tuple(color[: len(mode)])).save(path)
        return path

    return _write
