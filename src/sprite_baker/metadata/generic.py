"""Flat, ungrouped atlas description."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from sprite_baker import __version__
from sprite_baker.data import Placement, SourceImage

APP_NAME = "sprite-baker"


def generic_document_path(output_file: str) -> Path:
    """The atlas path with its extension swapped for ``.json``."""

    return Path(output_file).with_suffix(".json")


def _frame_entry(
    filename: str,
    placement: Placement,
    trimmed: bool,
    image: Optional[SourceImage],
) -> Dict[str, Any]:
    source_width, source_height = placement.width, placement.height
    offset_x, offset_y = 0, 0
    if image is not None and image.trimmed:
        source_width, source_height = image.source_size
        offset_x, offset_y = image.trim_offset
    return {
        "filename": filename,
        "rotated": False,
        "trimmed": trimmed,
        "frame": {"x": placement.x, "y": placement.y, "w": placement.width, "h": placement.height},
        "pivot": {"x": 0.5, "y": 0.5},
        "source_size": {"w": source_width, "h": source_height},
        "sprite_source_size": {"x": offset_x, "y": offset_y, "w": placement.width, "h": placement.height},
    }


def build_generic_document(
    placements: Sequence[Placement],
    filenames: Sequence[str],
    output_file: str,
    texture_size: Tuple[int, int],
    trimmed: bool = False,
    images: Optional[Sequence[SourceImage]] = None,
) -> Dict[str, Any]:
    """Describe every placement as an independent frame."""

    frames = [
        _frame_entry(
            filenames[placement.id],
            placement,
            trimmed,
            images[placement.id] if images is not None else None,
        )
        for placement in sorted(placements, key=lambda item: item.id)
    ]
    return {
        "frames": frames,
        "meta": {
            "app": APP_NAME,
            "version": __version__,
            "image": output_file,
            "format": "RGBA8888",
            "size": {"w": texture_size[0], "h": texture_size[1]},
            "scale": "1",
        },
    }
