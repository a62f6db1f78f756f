"""Bake pipeline: ingest, pack, composite, describe."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from sprite_baker.compositor import composite, write_atlas
from sprite_baker.config.schema import BakeConfig
from sprite_baker.diagnostics import Timer, save_placement_overlay
from sprite_baker.errors import EncodeError, MetadataIOError
from sprite_baker.metadata import (
    build_generic_document,
    build_sprite_files,
    generic_document_path,
    write_json,
    write_sprite_files,
)
from sprite_baker.metadata.documents import INDEX_FILENAME
from sprite_baker.packer import pack
from sprite_baker.sprites import load_images

log = logging.getLogger(__name__)


def _prepare_folders(config: BakeConfig) -> None:
    """Create every output folder so a bad metadata or debug path fails before the atlas is written."""

    folders = [(config.output_path.parent, EncodeError)]
    if config.sprite_format:
        folders.append((config.metadata_folder, MetadataIOError))
    if config.debug_output_dir:
        folders.append((config.debug_output_dir, EncodeError))
    for folder, error in folders:
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise error(f"Unable to create output folder ({exc.strerror or exc})", folder) from exc

def run_bake(config: BakeConfig) -> Dict[str, Any]:
    """Run a full bake and write the atlas plus its metadata.

    Every stage runs to completion before anything is written, so a failure
    leaves no partial output behind.
    """

    texture_size = (config.output_width, config.output_height)
    log.info("Found %d input files", len(config.input_files))

    with Timer() as timer:
        images = load_images(config.input_files, scale_percent=config.scale_percent, trim=config.trim_images)
        placements = pack(images, config.output_width, config.output_height, config.padding)
        canvas = composite(images, placements, config.output_width, config.output_height, config.background)

        sprite_files: List[Tuple[Path, Dict[str, Any]]] = []
        generic: Dict[str, Any] = {}
        if config.sprite_format:
            sprite_files = build_sprite_files(
                placements,
                config.input_files,
                texture_path=config.output_file,
                texture_size=texture_size,
                folder=config.metadata_folder,
                images=images,
                frame_duration_ms=config.frame_duration_ms,
                loop=config.loop_animations,
            )
        else:
            generic = build_generic_document(
                placements,
                config.input_files,
                output_file=config.output_file,
                texture_size=texture_size,
                trimmed=config.trim_images,
                images=images,
            )

        _prepare_folders(config)
        write_atlas(config.output_path, canvas)
        result: Dict[str, Any] = {
            "output_image": config.output_file,
            "placements": placements,
            "sprite_files": [],
            "metadata_file": None,
        }
        if config.sprite_format:
            written = write_sprite_files(sprite_files, config.metadata_folder)
            result["sprite_files"] = [path.as_posix() for path in written]
            result["metadata_file"] = (config.metadata_folder / INDEX_FILENAME).as_posix()
        else:
            metadata_path = generic_document_path(config.output_file)
            write_json(metadata_path, generic)
            result["metadata_file"] = metadata_path.as_posix()

        if config.debug_output_dir:
            overlay = save_placement_overlay(canvas, placements, config.debug_output_dir)
            log.info("Wrote placement overlay to '%s'", overlay)

    result["elapsed_ms"] = timer.elapsed * 1000.0
    return result
