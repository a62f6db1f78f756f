"""Sprite document persistence with merge-on-rewrite."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sprite_baker.data import Placement, SourceImage, SpriteDocument
from sprite_baker.errors import MetadataIOError
from sprite_baker.metadata.grouping import build_sprite_document, group_frames

log = logging.getLogger(__name__)

INDEX_FILENAME = "all_sprite_files.json"
SPRITE_SUFFIX = ".sprite"


def dump_json(payload: Any) -> str:
    return json.dumps(payload, indent=4) + "\n"


def write_json(path: Path, payload: Any) -> None:
    """Write a JSON document, raising ``MetadataIOError`` on failure."""

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dump_json(payload))
    except OSError as exc:
        raise MetadataIOError(f"Unable to write to ({exc.strerror or exc})", path) from exc


def sprite_document_path(folder: Path, sprite_name: str) -> Path:
    return folder / f"{sprite_name}{SPRITE_SUFFIX}"


def load_existing_document(path: Path) -> Optional[Dict[str, Any]]:
    """Read a previously written sprite document.

    Never raises: a missing, unreadable or malformed file yields ``None``.
    """

    if not path.is_file():
        return None
    try:
        payload = json.loads(path.read_text())
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        log.warning("Ignoring unreadable sprite file '%s': %s", path, exc)
        return None
    if not isinstance(payload, dict):
        log.warning("Ignoring sprite file '%s': top level is not an object", path)
        return None
    return payload


def merge_existing(document: SpriteDocument, existing: Optional[Dict[str, Any]]) -> SpriteDocument:
    """Carry authored ``animations`` and ``frames_offsets`` over verbatim."""

    if not existing:
        return document
    animations = existing.get("animations")
    if isinstance(animations, list):
        document.animations = animations
    offsets = existing.get("frames_offsets")
    if isinstance(offsets, list):
        document.frame_offsets = offsets
    return document


def build_sprite_files(
    placements: Sequence[Placement],
    filenames: Sequence[str],
    texture_path: str,
    texture_size: Tuple[int, int],
    folder: Path,
    images: Optional[Sequence[SourceImage]] = None,
    frame_duration_ms: int = 100,
    loop: bool = True,
) -> List[Tuple[Path, Dict[str, Any]]]:
    """Build every sprite document, merged with what is already on disk.

    Returns (path, payload) pairs in sprite name order; nothing is written.
    """

    files = []
    for sprite_name, frames in group_frames(filenames).items():
        path = sprite_document_path(folder, sprite_name)
        document = build_sprite_document(
            sprite_name,
            frames,
            placements,
            texture_path=texture_path,
            texture_size=texture_size,
            images=images,
            frame_duration_ms=frame_duration_ms,
            loop=loop,
        )
        document = merge_existing(document, load_existing_document(path))
        files.append((path, document.to_json()))
    return files


def build_index(sprite_paths: Sequence[Path]) -> Dict[str, List[str]]:
    return {"all_sprites": sorted(path.as_posix() for path in sprite_paths)}


def write_sprite_files(files: Sequence[Tuple[Path, Dict[str, Any]]], folder: Path) -> List[Path]:
    """Write sprite documents and the index document, returning the sprite paths."""

    paths = []
    for path, payload in files:
        write_json(path, payload)
        paths.append(path)
    write_json(folder / INDEX_FILENAME, build_index(paths))
    log.info("Wrote %d sprite files to '%s'", len(paths), folder)
    return paths
