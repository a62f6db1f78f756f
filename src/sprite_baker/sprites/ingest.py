"""Source image ingestion: decode, normalize, scale and trim."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from sprite_baker.data import SourceImage
from sprite_baker.errors import ScaleError
from sprite_baker.io import decode_image, resample_image, scaled_size
from sprite_baker.sprites.trim import trim_image

log = logging.getLogger(__name__)


def ingest_image(path: Union[str, Path], scale_percent: int = 100, trim: bool = False) -> SourceImage:
    """Load one source image as RGBA, optionally rescaled and trimmed.

    Scaling is applied before trimming so the trim box is measured on the
    pixels that end up in the atlas.
    """

    pixels = decode_image(path)
    if scale_percent != 100:
        height, width = pixels.shape[:2]
        new_width, new_height = scaled_size(width, height, scale_percent)
        try:
            pixels = resample_image(pixels, new_width, new_height)
        except ScaleError as exc:
            raise ScaleError(exc.message, path) from exc

    image = SourceImage(
        path=Path(path),
        pixels=pixels,
        source_size=(int(pixels.shape[1]), int(pixels.shape[0])),
    )
    if trim:
        image = trim_image(image)
    return image


def load_images(paths: Iterable[Union[str, Path]], scale_percent: int = 100, trim: bool = False) -> List[SourceImage]:
    """Ingest every path in order."""

    images = [ingest_image(path, scale_percent=scale_percent, trim=trim) for path in paths]
    log.info("Loaded %d input images", len(images))
    return images
