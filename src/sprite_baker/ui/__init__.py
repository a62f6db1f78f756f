"""Web UI."""

from sprite_baker.ui.app import create_app

__all__ = ["create_app"]
