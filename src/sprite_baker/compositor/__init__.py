"""Atlas compositing."""

from sprite_baker.compositor.atlas import composite, write_atlas

__all__ = ["composite", "write_atlas"]
