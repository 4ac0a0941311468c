"""Command line front end for the renderer.

    herefornow svg 5 -o state-5.svg
    herefornow token-uri 2 --held 2000000000000000000
    herefornow decode uri.txt
    herefornow preview -o outputs/
    herefornow sizes 0 10 100 418 1000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

from herefornow.codec.config import LayoutConfig
from herefornow.codec.errors import DataURIError, RenderError
from herefornow.codec.laws import get_registry
from herefornow.codec.metadata import decode_image, parse_token_uri
from herefornow.codec.renderer import Renderer, create_renderer
from herefornow.codec.svg import estimate_svg_length, is_solid, total_lines
from herefornow.config import settings
from herefornow.preview import DEFAULT_STATES, PreviewState, render_preview_html

logger = logging.getLogger(__name__)

_SIZE_COUNTS = [0, 10, 50, 100, 200, 300, 400, 417, 418, 500, 598, 700, 1000, 2000]


def _write_or_print(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        logger.info("Written to %s", output)
    else:
        sys.stdout.write(text + "\n")


def cmd_svg(args: argparse.Namespace, renderer: Renderer) -> int:
    svg = renderer.svg(args.count)
    if args.png:
        from PIL import Image

        from herefornow.utils.rasterizer import lit_mask, rasterize_svg, row_coverage

        rgba = rasterize_svg(svg, args.size)
        Image.fromarray(rgba).save(args.png, format="PNG")
        lit_rows = int(np.count_nonzero(row_coverage(lit_mask(rgba))))
        logger.info("Written to %s (%d of %d rows lit)", args.png, lit_rows, args.size)
    if args.show:
        from herefornow.utils.rasterizer import (
            grid_fill_percentage,
            grid_to_halfblock,
            layout_grid,
            row_coverage,
        )

        grid = layout_grid(args.count, renderer.layout)
        sys.stdout.write(grid_to_halfblock(grid) + "\n")
        logger.info(
            "%d lines, %d rows lit, %.1f%% lit",
            total_lines(args.count),
            int(np.count_nonzero(row_coverage(grid))),
            grid_fill_percentage(grid),
        )
        return 0
    _write_or_print(svg, args.output)
    return 0


def cmd_token_uri(args: argparse.Namespace, renderer: Renderer) -> int:
    _write_or_print(renderer.token_uri(args.count, args.held), args.output)
    return 0


def cmd_decode(args: argparse.Namespace, renderer: Renderer) -> int:
    uri = Path(args.input).read_text(encoding="utf-8").strip() if args.input != "-" else sys.stdin.read().strip()
    metadata = parse_token_uri(uri)
    svg = decode_image(metadata)

    print(f"Name:        {metadata.get('name')}")
    print(f"Description: {str(metadata.get('description', ''))[:60]}...")
    attributes = metadata.get("attributes", [])
    if not isinstance(attributes, list) or not all(isinstance(a, dict) for a in attributes):
        raise DataURIError("token URI attributes must be a list of objects")
    for attr in attributes:
        print(f"  - {attr.get('trait_type')}: {attr.get('value')}")
    print(f"Image:       {len(svg)} bytes, {svg.count('<use')} lines")
    if args.svg:
        Path(args.svg).write_text(svg, encoding="utf-8")
        logger.info("Written to %s", args.svg)
    if args.json:
        print(json.dumps(metadata, indent=2, ensure_ascii=False))
    return 0


def cmd_preview(args: argparse.Namespace, renderer: Renderer) -> int:
    out_dir = Path(args.output)
    out_dir.mkdir(parents=True, exist_ok=True)

    counts = args.counts or DEFAULT_STATES
    states = [PreviewState(c, args.held) for c in counts]
    for state in states:
        path = out_dir / f"state-{state.presence_count}.svg"
        path.write_text(renderer.svg(state.presence_count), encoding="utf-8")
        logger.info("Written to %s", path.name)

    (out_dir / "preview.html").write_text(render_preview_html(states, renderer), encoding="utf-8")
    (out_dir / "sample-token-uri.txt").write_text(
        renderer.token_uri(counts[-1], args.held), encoding="utf-8"
    )
    logger.info("Preview written to %s", out_dir / "preview.html")
    return 0


def cmd_sizes(args: argparse.Namespace, renderer: Renderer) -> int:
    """Line count and SVG size per presence count."""
    print("Present    | Lines | SVG bytes | Estimate  | Mode")
    print("-----------|-------|-----------|-----------|------")
    for count in args.counts or _SIZE_COUNTS:
        size = len(renderer.svg(count).encode("utf-8"))
        solid = is_solid(count, renderer.layout)
        print(
            f"{count:>10} | {total_lines(count):>5} | {size:>9} | "
            f"{estimate_svg_length(count, renderer.layout):>9} | "
            f"{'solid' if solid else renderer.layout.interpolation}"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="herefornow",
        description="Here, For Now — presence SVG and token metadata renderer",
    )
    parser.add_argument(
        "--interpolation",
        choices=get_registry().names(),
        default=settings.hfn_interpolation,
        help="Line placement law",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=settings.hfn_solid_threshold,
        help="Line count at which the image becomes a solid block",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("svg", help="Render the SVG for a presence count")
    p.add_argument("count", type=int)
    p.add_argument("-o", "--output", help="Output .svg file (default: stdout)")
    p.add_argument("--png", help="Also rasterize to this PNG file")
    p.add_argument("--size", type=int, default=1000, help="PNG width/height")
    p.add_argument("--show", action="store_true", help="Print a terminal preview instead")
    p.set_defaults(func=cmd_svg)

    p = sub.add_parser("token-uri", help="Build the base64 JSON token URI")
    p.add_argument("count", type=int)
    p.add_argument("--held", type=int, default=None, help="Total held amount in wei")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.set_defaults(func=cmd_token_uri)

    p = sub.add_parser("decode", help="Decode a token URI read from a file or '-'")
    p.add_argument("input")
    p.add_argument("--svg", help="Write the embedded SVG to this file")
    p.add_argument("--json", action="store_true", help="Dump the full metadata JSON")
    p.set_defaults(func=cmd_decode)

    p = sub.add_parser("preview", help="Write state SVGs and an HTML preview sheet")
    p.add_argument("counts", type=int, nargs="*")
    p.add_argument("--held", type=int, default=None, help="Held amount in wei shown on every card")
    p.add_argument("-o", "--output", default="outputs", help="Output folder")
    p.set_defaults(func=cmd_preview)

    p = sub.add_parser("sizes", help="Print SVG size per presence count")
    p.add_argument("counts", type=int, nargs="*")
    p.set_defaults(func=cmd_sizes)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.hfn_log_level.upper(), logging.INFO),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        layout = LayoutConfig(solid_threshold=args.threshold, interpolation=args.interpolation)
        renderer = create_renderer(settings.renderer_config(), layout)
        return args.func(args, renderer)
    except RenderError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
