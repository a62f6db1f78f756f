"""Image I/O utilities."""

from sprite_baker.io.images import (
    decode_image,
    encode_png,
    resample_image,
    scaled_size,
)

__all__ = ["decode_image", "encode_png", "resample_image", "scaled_size"]
