"""Command line entry point for baking a sprite atlas."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sprite_baker import __version__
from sprite_baker.baker import run_bake
from sprite_baker.config import load_config
from sprite_baker.errors import BakeError, ConfigError

USAGE = f"""Usage: sprite-baker -width 512 -height 512 -input [image1.png image2.png ...] -output sprite_atlas.png
Required arguments:
\t-width, -height, -input, -output

Optional arguments:
\t-bg_color [r g b [a], 0 - 255], -padding [>= 0], -scale [percentage], -trim_images [flag],
\t-sprite_format [flag], -sprite_folder [folder], -config [json file], -debug_output_dir [folder]

Version: {__version__}
"""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigError(f"Invalid arguments, {message}.")


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = _ArgumentParser(description="Bake images into a texture atlas", add_help=False)
    parser.add_argument("-width", type=int, help="Atlas width in pixels")
    parser.add_argument("-height", type=int, help="Atlas height in pixels")
    parser.add_argument("-input", nargs="+", help="Image paths, a folder, or a file listing image paths")
    parser.add_argument("-output", help="Atlas image path")
    parser.add_argument("-scale", type=int, help="Scale every input by a percentage")
    parser.add_argument("-padding", type=int, help="Border reserved around every image")
    parser.add_argument("-bg_color", type=int, nargs="+", metavar="C", help="Background color r g b [a], alpha defaults to 0")
    parser.add_argument("-trim_images", action="store_true", default=None, help="Trim transparent borders")
    parser.add_argument("-sprite_format", action="store_true", default=None, help="Write grouped sprite files")
    parser.add_argument("-sprite_folder", help="Folder for sprite files, defaults to the atlas folder")
    parser.add_argument("-config", type=Path, help="Optional JSON config path")
    parser.add_argument("-debug_output_dir", type=Path, help="Write a placement overlay to this folder")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    try:
        args = _parse_args(argv)
        config = load_config(
            args.config,
            {
                "output_width": args.width,
                "output_height": args.height,
                "input_files": args.input,
                "output_file": args.output,
                "scale_percent": args.scale,
                "padding": args.padding,
                "background": args.bg_color,
                "trim_images": args.trim_images,
                "sprite_format": args.sprite_format,
                "sprite_folder": args.sprite_folder,
                "debug_output_dir": str(args.debug_output_dir) if args.debug_output_dir else None,
            },
        )
        result = run_bake(config)
    except BakeError as exc:
        print(f"\nError: {exc}\n")
        print(USAGE)
        return 1

    print(f"Successfully baked [version: {__version__}]")
    for path in config.input_files:
        print(f"\t'{path}'")
    print(f"to '{config.output_file}' during {result['elapsed_ms']:.0f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
