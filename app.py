"""Launcher: bake from the command line or serve the web UI."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from sprite_baker.main import main as bake_main


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sprite baker launcher")
    subparsers = parser.add_subparsers(dest="command")

    ui_parser = subparsers.add_parser("ui", help="Serve the bake form and atlas preview")
    ui_parser.add_argument("--host", default="127.0.0.1", help="UI host")
    ui_parser.add_argument("--port", type=int, default=5000, help="UI port")
    ui_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")

    bake_parser = subparsers.add_parser("bake", help="Bake an atlas, e.g. bake -width 512 -height 512 ...")
    bake_parser.add_argument("bake_args", nargs=argparse.REMAINDER, help="Arguments passed to sprite-baker")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.command == "bake":
        return bake_main(args.bake_args)

    from sprite_baker.ui import create_app

    create_app().run(
        host=getattr(args, "host", "127.0.0.1"),
        port=getattr(args, "port", 5000),
        debug=bool(getattr(args, "debug", False)),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
