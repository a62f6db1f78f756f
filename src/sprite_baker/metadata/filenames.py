"""Filename grammar for sprite grouping.

A source path reads as::

    [folder/]<name>[\\[tag\\]][digits].<ext>

``name`` is the sprite, ``tag`` the animation and ``digits`` the frame
index. The stem ends at the first dot of the basename. Trailing digits only
count as a frame index when a tag precedes them; otherwise they stay part of
the sprite name, so ``icon2.png`` is the single-image sprite ``icon2``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from sprite_baker.data import FrameKey

_DIGITS = "0123456789"


def split_path(path: Union[str, Path]) -> Tuple[str, str]:
    """Split into (folder with trailing slash, stem)."""

    normalized = str(path).replace("\\", "/")
    folder, slash, basename = normalized.rpartition("/")
    stem = basename.split(".", 1)[0]
    return (folder + slash, stem)


def split_trailing_digits(stem: str) -> Tuple[str, str]:
    end = len(stem)
    start = end
    while start > 0 and stem[start - 1] in _DIGITS:
        start -= 1
    return (stem[:start], stem[start:end])


def split_tag(head: str) -> Optional[Tuple[str, str]]:
    """Return (name, tag) when ``head`` ends with a bracketed tag.

    The tag runs from the first ``[`` to the closing ``]``.
    """

    if not head.endswith("]"):
        return None
    opening = head.find("[")
    if opening < 0:
        return None
    return (head[:opening], head[opening + 1 : -1])


def parse_frame_key(path: Union[str, Path]) -> FrameKey:
    """Parse a source path into its sprite, animation and frame index."""

    folder, stem = split_path(path)
    head, digits = split_trailing_digits(stem)
    tagged = split_tag(head)
    if tagged is None:
        return FrameKey(folder=folder, sprite_name=stem)
    name, tag = tagged
    return FrameKey(
        folder=folder,
        sprite_name=name,
        animation_name=tag,
        frame_index=int(digits) if digits else None,
    )


def frame_name(key: FrameKey) -> str:
    """Name of a frame inside its sprite document."""

    if not key.animation_name:
        return key.sprite_name
    if key.frame_index is None:
        return f"{key.sprite_name}_{key.animation_name}"
    return f"{key.sprite_name}_{key.animation_name}_{key.frame_index}"
