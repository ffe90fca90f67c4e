#!/usr/bin/env python3
#
# PROJECT: sierpinski-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import argparse
import logging
import shutil
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sierpinski_cli_renderer.demo import DemoApp, config_from_args, render_text
from sierpinski_cli_renderer.errors import SurfaceError

logger = logging.getLogger("sierpinski_cli_renderer")


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s                                  Two triangles, depth 4 and 7
  %(prog)s --depth 5                        One triangle of depth 5
  %(prog)s --depth 2 --depth 3 --depth 4    Three triangles side by side
  %(prog)s --ascii --glyph '#'              Glyph cells instead of Braille
  %(prog)s --color #FF8800 --bg-color #1A1A2E   Orange on dark blue
  %(prog)s --print --cols 80 --rows 24      Print to stdout, no curses
"""
    parser = argparse.ArgumentParser(
        description="CLI Sierpinski Triangle Renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--depth", type=int, action="append",
                        help="Recursion depth of a triangle; repeat for more "
                             "triangles (default: 4 and 7)")
    parser.add_argument("--glyph", default=None,
                        help="Character drawn in glyph mode (default: ◆ or *)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--mono", action="store_true",
                        help="Force monochrome output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use glyph cells instead of Braille")
    parser.add_argument("--color", default="#00FF00",
                        help="Line color in hex #RRGGBB (default: #00FF00)")
    parser.add_argument("--bg-color", default="#000000",
                        help="Background color in hex #RRGGBB (default: #000000)")
    parser.add_argument("--print", dest="print_only", action="store_true",
                        help="Print the picture to stdout instead of using curses")
    parser.add_argument("--cols", type=int, default=None,
                        help="Output width for --print (default: terminal width)")
    parser.add_argument("--rows", type=int, default=None,
                        help="Output height for --print (default: terminal height)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug records")
    return parser.parse_args(argv)


def configure_logging(args):
    """File logging when asked for; curses owns the terminal otherwise."""
    level = logging.DEBUG if args.verbose else logging.INFO
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=level, format=fmt)
    elif args.print_only:
        logging.basicConfig(stream=sys.stderr,
                            level=level if args.verbose else logging.WARNING,
                            format=fmt)
    else:
        logger.addHandler(logging.NullHandler())


def print_picture(args, out=None):
    out = out or sys.stdout
    size = shutil.get_terminal_size()
    cols = args.cols if args.cols is not None else size.columns
    rows = args.rows if args.rows is not None else size.lines
    for line in render_text(config_from_args(args), cols, rows):
        print(line, file=out)


def main(stdscr, args):
    app = DemoApp(stdscr, args)
    app.run()


def cli(argv=None):
    args = parse_args(argv)
    configure_logging(args)
    try:
        if args.print_only:
            print_picture(args)
        else:
            curses.wrapper(lambda s: main(s, args))
    except KeyboardInterrupt:
        pass
    except (SurfaceError, ValueError) as e:
        # In --print mode logging shares stderr with the message below
        if args.log_file or not args.print_only:
            logger.error("Rendering failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
