"""Configuration loading and validation."""

from sprite_baker.config.schema import (
    BakeConfig,
    expand_inputs,
    load_config,
    read_input_list,
)

__all__ = [
    "BakeConfig",
    "expand_inputs",
    "load_config",
    "read_input_list",
]
