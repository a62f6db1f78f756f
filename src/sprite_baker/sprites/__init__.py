"""Source image ingestion and trimming."""

from sprite_baker.sprites.ingest import ingest_image, load_images
from sprite_baker.sprites.trim import alpha_bounds, trim_image

__all__ = ["alpha_bounds", "ingest_image", "load_images", "trim_image"]
