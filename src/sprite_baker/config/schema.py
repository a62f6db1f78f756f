"""Configuration schema and loading utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from sprite_baker.errors import ConfigError


@dataclass(frozen=True)
class BakeConfig:
    """Top-level configuration for a single bake."""

    input_files: List[str]
    output_file: str
    output_width: int
    output_height: int
    scale_percent: int = 100
    padding: int = 0
    background: Tuple[int, int, int, int] = (0, 0, 0, 0)
    trim_images: bool = False
    sprite_format: bool = False
    sprite_folder: Optional[str] = None
    frame_duration_ms: int = 100
    loop_animations: bool = True
    debug_output_dir: Optional[Path] = None
    image_extensions: List[str] = field(
        default_factory=lambda: [".png", ".jpg", ".jpeg", ".bmp", ".tga", ".gif", ".webp"]
    )

    @property
    def output_path(self) -> Path:
        return Path(self.output_file)

    @property
    def metadata_folder(self) -> Path:
        """Folder receiving sprite documents and the index document."""

        if self.sprite_folder:
            return Path(self.sprite_folder)
        return self.output_path.parent


def _merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overrides into base without mutating either input."""

    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


def read_input_list(path: Path) -> List[str]:
    """Read whitespace separated image paths from a list file."""

    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ConfigError(f"Unable to read input list: {exc.strerror or exc}", path) from exc
    return [token.replace("\\", "/") for token in text.split()]


def expand_inputs(inputs: List[str], extensions: List[str]) -> List[str]:
    """Expand a single list file or directory argument into image paths.

    A directory yields its images sorted by name so that bakes are
    reproducible across platforms.
    """

    if len(inputs) == 1:
        candidate = Path(inputs[0])
        if candidate.is_dir():
            return [
                path.as_posix()
                for path in sorted(candidate.iterdir())
                if path.suffix.lower() in extensions
            ]
        if candidate.is_file() and candidate.suffix.lower() not in extensions:
            return read_input_list(candidate)
    return list(inputs)


def _parse_background(value: Any) -> Tuple[int, ...]:
    """Accept a sequence of channels or an "r g b [a]" string; alpha defaults to 0."""

    if isinstance(value, str):
        value = value.split()
    channels = tuple(int(c) for c in value)
    if len(channels) == 3:
        channels += (0,)
    return channels


def _validate(config: BakeConfig) -> BakeConfig:
    if not config.input_files:
        raise ConfigError("Invalid arguments, missing valid 'input'.")
    if not config.output_file:
        raise ConfigError("Invalid arguments, missing valid 'output'.")
    if config.output_width <= 0:
        raise ConfigError("Invalid arguments, missing valid 'width'.")
    if config.output_height <= 0:
        raise ConfigError("Invalid arguments, missing valid 'height'.")
    if config.scale_percent <= 0:
        raise ConfigError("Invalid arguments, 'scale' must be a positive percentage.")
    if config.padding < 0:
        raise ConfigError("Invalid arguments, 'padding' must be >= 0.")
    if len(config.background) != 4 or any(not 0 <= c <= 255 for c in config.background):
        raise ConfigError("Invalid arguments, 'bg_color' needs three or four values in 0 - 255.")
    if config.frame_duration_ms <= 0:
        raise ConfigError("Invalid arguments, 'frame_duration_ms' must be positive.")
    return config


def load_config(path: Optional[Path], overrides: Optional[Dict[str, Any]] = None) -> BakeConfig:
    """Load configuration from JSON, apply overrides and validate.

    ``None`` values in ``overrides`` are ignored so that unset command line
    options do not clobber values from the file.
    """

    base: Dict[str, Any] = {
        "input_files": [],
        "output_file": "",
        "output_width": 0,
        "output_height": 0,
        "scale_percent": 100,
        "padding": 0,
        "background": [0, 0, 0, 0],
        "trim_images": False,
        "sprite_format": False,
        "sprite_folder": None,
        "frame_duration_ms": 100,
        "loop_animations": True,
        "debug_output_dir": None,
        "image_extensions": [".png", ".jpg", ".jpeg", ".bmp", ".tga", ".gif", ".webp"],
    }

    merged = base
    if path:
        try:
            raw = json.loads(Path(path).read_text())
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Unable to read config: {exc}", path) from exc
        if not isinstance(raw, dict):
            raise ConfigError("Config file must contain a JSON object.", path)
        merged = _merge_dict(merged, raw)
    if overrides:
        merged = _merge_dict(merged, {key: value for key, value in overrides.items() if value is not None})

    try:
        extensions = [str(ext).lower() for ext in merged.get("image_extensions", base["image_extensions"])]
        config = BakeConfig(
            input_files=expand_inputs([str(p) for p in merged.get("input_files", [])], extensions),
            output_file=str(merged.get("output_file") or ""),
            output_width=int(merged.get("output_width", 0)),
            output_height=int(merged.get("output_height", 0)),
            scale_percent=int(merged.get("scale_percent", base["scale_percent"])),
            padding=int(merged.get("padding", base["padding"])),
            background=_parse_background(merged.get("background", base["background"])),
            trim_images=bool(merged.get("trim_images", base["trim_images"])),
            sprite_format=bool(merged.get("sprite_format", base["sprite_format"])),
            sprite_folder=str(merged["sprite_folder"]) if merged.get("sprite_folder") else None,
            frame_duration_ms=int(merged.get("frame_duration_ms", base["frame_duration_ms"])),
            loop_animations=bool(merged.get("loop_animations", base["loop_animations"])),
            debug_output_dir=Path(merged["debug_output_dir"]) if merged.get("debug_output_dir") else None,
            image_extensions=extensions,
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid configuration value: {exc}") from exc
    return _validate(config)
