"""Error taxonomy for the baking pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class BakeError(Exception):
    """Base class for every terminal failure of a bake."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(f"{message} '{self.path}'" if self.path else message)


class ConfigError(BakeError):
    """Invalid or missing configuration values."""


class DecodeError(BakeError):
    """A source image could not be decoded."""


class ScaleError(BakeError):
    """A source image could not be resampled."""


class TrimError(BakeError):
    """A source image has no non-transparent pixels to keep."""


class PackError(BakeError):
    """The images do not fit into the requested atlas size."""


class EncodeError(BakeError):
    """The atlas image could not be written."""


class MetadataIOError(BakeError):
    """A metadata document could not be written."""
