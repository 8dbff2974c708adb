# cli.py
# Command-line front-end: map file (or stdin) -> SVG on stdout.

from __future__ import annotations
import argparse
import logging
import sys
from typing import Sequence

from .compiler import compile_map
from .config import D
from .errors import CompileError
from .io_save_load import load_source, save_display_model
from .log import setup_logging
from .raster import render_png
from .svg import render_svg

log = logging.getLogger(__name__)


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid dimension: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"dimension must be positive: {text!r}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ttmap", description="Compile a TTRPG grid map description into SVG.")
    parser.add_argument("-f", "--file", help="Input map file (default: read stdin)")
    parser.add_argument(
        "-d",
        "--dimension",
        type=_positive_float,
        default=D.CELL_PX,
        help=f"Map cell dimension in pixels (default {D.CELL_PX})",
    )
    parser.add_argument("--png", help="Also write a PNG preview to this path")
    parser.add_argument("--json", help="Also write the display model as JSON to this path")
    parser.add_argument("--no-grid", action="store_true", help="Omit the background grid cells")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        source = load_source(args.file) if args.file else sys.stdin.read()
    except OSError as e:
        print(f"ERROR: could not read {args.file}: {e}", file=sys.stderr)
        return 2

    try:
        model = compile_map(source, args.dimension)
    except CompileError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(render_svg(model, grid=not args.no_grid))
    try:
        if args.png:
            render_png(model, args.png, grid=not args.no_grid)
            log.info("wrote %s", args.png)
        if args.json:
            save_display_model(args.json, model)
            log.info("wrote %s", args.json)
    except OSError as e:
        print(f"ERROR: could not write output: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
