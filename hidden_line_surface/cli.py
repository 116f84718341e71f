#
# PROJECT: hidden-line-surface
# MODULE: hidden_line_surface/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys

from .color import parse_argb
from .config import RenderConfig
from .renderer import SurfaceRenderer


def _argb_color(value):
    """argparse type: '#RRGGBB' -> opaque ARGB word."""
    color = parse_argb(value)
    if color is None:
        raise argparse.ArgumentTypeError(
            f"invalid color {value!r}, expected #RRGGBB")
    return color


def parse_args(argv=None):
    """CLI argument parser; every default reproduces the stock render."""
    epilog = """\
examples:
  %(prog)s                                     Write output.tga and output.bmp
  %(prog)s --tga sinc.tga --bmp sinc.bmp       Custom file names
  %(prog)s --fg-color #00FF88 --bg-color #101020   Green mesh on dark blue
"""
    parser = argparse.ArgumentParser(
        description="Hidden-line isometric plot of z = sin(r)/r",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--tga", default="output.tga",
                        help="TGA output path (default: output.tga)")
    parser.add_argument("--bmp", default="output.bmp",
                        help="BMP output path (default: output.bmp)")
    parser.add_argument("--fg-color", type=_argb_color, default=None,
                        help="Line color in hex #RRGGBB (default: #FFFFFF)")
    parser.add_argument("--bg-color", type=_argb_color, default=None,
                        help="Background color in hex #RRGGBB (default: #000000)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress and timings")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    config = RenderConfig().with_colors(args.fg_color, args.bg_color)
    renderer = SurfaceRenderer(config)
    try:
        canvas = renderer.render()
        renderer.save(canvas, args.tga, args.bmp)
    except KeyboardInterrupt:
        return 130
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
