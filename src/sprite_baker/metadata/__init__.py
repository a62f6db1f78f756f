"""Sprite metadata: filename grouping, sprite documents and generic output."""

from sprite_baker.metadata.documents import (
    build_index,
    build_sprite_files,
    load_existing_document,
    merge_existing,
    write_json,
    write_sprite_files,
)
from sprite_baker.metadata.filenames import frame_name, parse_frame_key
from sprite_baker.metadata.generic import build_generic_document, generic_document_path
from sprite_baker.metadata.grouping import build_sprite_document, group_frames, synthesize_animations

__all__ = [
    "build_generic_document",
    "build_index",
    "build_sprite_document",
    "build_sprite_files",
    "frame_name",
    "generic_document_path",
    "group_frames",
    "load_existing_document",
    "merge_existing",
    "parse_frame_key",
    "synthesize_animations",
    "write_json",
    "write_sprite_files",
]
