"""Grouping of parsed frames into sprites and animation synthesis."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from sprite_baker.data import (
    AnimationDescriptor,
    Placement,
    SourceImage,
    SpriteDocument,
    SpriteFrame,
)
from sprite_baker.metadata.filenames import frame_name, parse_frame_key

DEFAULT_ANIMATION = "default"


def _frame_order(frame: SpriteFrame) -> Tuple[str, int, int]:
    index = -1 if frame.key.frame_index is None else frame.key.frame_index
    return (frame.key.animation_name, index, frame.placement_id)


def group_frames(filenames: Sequence[str]) -> Dict[str, List[SpriteFrame]]:
    """Map sprite name to its ordered frames.

    Keys are inserted in sorted order and frames are ordered by animation
    name, then frame index, then input position, so output never depends on
    hash or directory order.
    """

    buckets: Dict[str, List[SpriteFrame]] = {}
    for placement_id, filename in enumerate(filenames):
        key = parse_frame_key(filename)
        buckets.setdefault(key.sprite_name, []).append(SpriteFrame(placement_id=placement_id, key=key))
    return {name: sorted(buckets[name], key=_frame_order) for name in sorted(buckets)}


def frame_offset(image: Optional[SourceImage]) -> Dict[str, float]:
    """Displacement of a trimmed frame's centre from the untrimmed centre."""

    if image is None or not image.trimmed:
        return {"x": 0.0, "y": 0.0}
    source_width, source_height = image.source_size
    offset_x, offset_y = image.trim_offset
    return {
        "x": float(offset_x + image.width / 2.0 - source_width / 2.0),
        "y": float(offset_y + image.height / 2.0 - source_height / 2.0),
    }


def synthesize_animations(
    frames: Sequence[SpriteFrame],
    frame_duration_ms: int = 100,
    loop: bool = True,
) -> List[AnimationDescriptor]:
    """One animation per tag, or a single ``default`` one when untagged."""

    by_name: Dict[str, List[int]] = {}
    for index, frame in enumerate(frames):
        if frame.key.animation_name:
            by_name.setdefault(frame.key.animation_name, []).append(index)
    if not by_name:
        by_name[DEFAULT_ANIMATION] = [0]
    return [
        AnimationDescriptor(name=name, loop=loop, frame_duration_ms=frame_duration_ms, frames=by_name[name])
        for name in sorted(by_name)
    ]


def build_sprite_document(
    sprite_name: str,
    frames: Sequence[SpriteFrame],
    placements: Sequence[Placement],
    texture_path: str,
    texture_size: Tuple[int, int],
    images: Optional[Sequence[SourceImage]] = None,
    frame_duration_ms: int = 100,
    loop: bool = True,
) -> SpriteDocument:
    """Derive a fresh sprite document from the current placements."""

    by_id = {placement.id: placement for placement in placements}
    entries = []
    offsets = []
    for frame in frames:
        placement = by_id[frame.placement_id]
        entries.append(
            {
                "name": frame_name(frame.key),
                "x": placement.x,
                "y": placement.y,
                "w": placement.width,
                "h": placement.height,
            }
        )
        offsets.append(frame_offset(images[frame.placement_id] if images is not None else None))

    first = min(frames, key=lambda frame: frame.placement_id)
    return SpriteDocument(
        texture_path=texture_path,
        texture_size=texture_size,
        source_folder=first.key.folder,
        frames=entries,
        frame_offsets=offsets,
        animations=[
            animation.to_json() for animation in synthesize_animations(frames, frame_duration_ms, loop)
        ],
    )
