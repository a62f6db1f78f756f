"""Core data structures used throughout the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np


@dataclass
class SourceImage:
    """Decoded source image as straight-alpha RGBA uint8, shape (h, w, 4)."""

    path: Path
    pixels: np.ndarray
    source_size: Tuple[int, int]
    trim_offset: Tuple[int, int] = (0, 0)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def channels(self) -> int:
        return int(self.pixels.shape[2])

    @property
    def trimmed(self) -> bool:
        return self.source_size != (self.width, self.height) or self.trim_offset != (0, 0)


@dataclass(frozen=True)
class PlacementRequest:
    """Padded rectangle handed to the packer."""

    id: int
    width: int
    height: int


@dataclass(frozen=True)
class Placement:
    """Packed image footprint inside the atlas, padding already stripped."""

    id: int
    x: int
    y: int
    width: int
    height: int

    def as_box(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class FrameKey:
    """Parsed form of a source filename."""

    folder: str
    sprite_name: str
    animation_name: str = ""
    frame_index: Optional[int] = None


@dataclass(frozen=True)
class SpriteFrame:
    """One source image assigned to a sprite."""

    placement_id: int
    key: FrameKey


@dataclass
class AnimationDescriptor:
    """Named sequence of frame-array indices."""

    name: str
    loop: bool
    frame_duration_ms: int
    frames: List[int] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "loop": self.loop,
            "frame_duration": self.frame_duration_ms,
            "frames": list(self.frames),
        }


@dataclass
class SpriteDocument:
    """Per-sprite metadata persisted as a ``.sprite`` file.

    ``animations`` and ``frame_offsets`` hold plain JSON values so that data
    carried over from a previous run is written back untouched.
    """

    texture_path: str
    texture_size: Tuple[int, int]
    source_folder: str
    frames: List[Dict[str, Any]]
    frame_offsets: List[Any]
    animations: List[Any]

    def to_json(self) -> Dict[str, Any]:
        return {
            "texture": self.texture_path,
            "source_folder": self.source_folder,
            "texture_size": {"w": self.texture_size[0], "h": self.texture_size[1]},
            "frames": self.frames,
            "frames_offsets": self.frame_offsets,
            "animations": self.animations,
        }
