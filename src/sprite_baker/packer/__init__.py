"""Rectangle packing."""

from sprite_baker.packer.skyline import Skyline, build_requests, pack, placement_order

__all__ = ["Skyline", "build_requests", "pack", "placement_order"]
