"""Diagnostics helpers."""

from sprite_baker.diagnostics.tracker import Timer, save_placement_overlay

__all__ = ["Timer", "save_placement_overlay"]
