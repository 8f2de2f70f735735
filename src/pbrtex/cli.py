from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .errors import TextureError
from .helpers import ConvertConfig
from .pipeline import TextureConverter


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pbrtex",
        description="Convert between combined metallic/smoothness and separate metallic/roughness textures",
    )
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for progress, -vv for debug output")
    sub = p.add_subparsers(dest="command", required=True)

    g_split = sub.add_parser(
        "split",
        help="Split a combined metallic/smoothness texture into metallic and roughness images",
        description=(
            "Split a combined metallic and smoothness texture into separate "
            "metallic and roughness images."
        ),
    )
    g_split.add_argument(
        "file",
        help="Greyscale image with alpha: black = non-metallic, white = metallic; "
             "transparent = fully rough, opaque = fully smooth",
    )

    g_merge = sub.add_parser(
        "merge",
        help="Merge metallic and roughness images into a combined metallic/smoothness texture",
        description=(
            "Merge separate metallic and roughness images into a combined "
            "metallic and smoothness texture."
        ),
    )
    g_merge.add_argument("metallic_file", help="Greyscale image: black = non-metallic, white = metallic")
    g_merge.add_argument("roughness_file", help="Greyscale image: white = fully rough, black = fully smooth")

    for sp in (g_split, g_merge):
        sp.add_argument("--save_dir", type=str, default=None, help="Output folder (default: next to the input)")
        sp.add_argument("--show", action="store_true", help="Display a preview before writing")

    return p


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    _configure_logging(args.verbose)
    logging.getLogger(__name__).debug("args: %s", args)

    converter = TextureConverter(ConvertConfig(save_dir=args.save_dir, show=args.show))
    try:
        if args.command == "split":
            converter.split(args.file)
        else:
            converter.merge(args.metallic_file, args.roughness_file)
    except TextureError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
