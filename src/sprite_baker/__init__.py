"""Bake source images into a single texture atlas plus sprite metadata."""

__version__ = "1.0.0"
