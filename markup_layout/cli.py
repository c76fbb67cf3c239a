"""
Command-line interface for markup_layout.

Usage:
    markup-layout input.html -o output.pdf
    markup-layout notes.md --format markdown --width 300 --height 400 -o notes.pdf
    markup-layout input.html -o output.pdf --config layout.json --no-wrap
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api import render_to_pdf
from .config import LayoutConfig
from .exceptions import MarkupLayoutError
from .parser import FORMATS
from .utils.logger import LOG_LEVELS
from .utils.rich_logger import configure_rich_logging
from .version import __version__

logger = logging.getLogger(__name__)

_SUFFIX_FORMATS = {".md": "markdown", ".markdown": "markdown", ".html": "html", ".htm": "html"}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="markup-layout",
        description="Lay out a small HTML or Markdown document onto a PDF page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  markup-layout page.html -o page.pdf
  markup-layout notes.md -o notes.pdf --width 300 --height 400
        """,
    )
    parser.add_argument("input", help="Input HTML or Markdown file ('-' for stdin)")
    parser.add_argument("-o", "--output", help="Output PDF path (default: input name with .pdf)")
    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        help="Input format (default: guessed from the file extension, else html)",
    )
    parser.add_argument("--width", type=float, default=595.0, help="Page width in points (default: 595)")
    parser.add_argument("--height", type=float, default=842.0, help="Page height in points (default: 842)")
    parser.add_argument("--margin", type=float, default=36.0, help="Page margin in points (default: 36)")
    parser.add_argument("--config", help="JSON file with layout configuration")
    parser.add_argument("--font-size", type=float, help="Base font size in points")
    parser.add_argument("--no-wrap", action="store_true", help="Disable line wrapping")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING", help="Log level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _guess_format(path: str) -> str:
    return _SUFFIX_FORMATS.get(Path(path).suffix.lower(), "html")


def _load_config(args: argparse.Namespace) -> LayoutConfig:
    config = LayoutConfig.from_json_file(args.config) if args.config else LayoutConfig()
    overrides = {}
    if args.font_size is not None:
        overrides["font_size"] = args.font_size
    if args.no_wrap:
        overrides["wrap_lines"] = False
    return config.with_overrides(**overrides) if overrides else config


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    args = create_parser().parse_args(argv)
    configure_rich_logging(args.log_level)

    fmt = args.format or ("html" if args.input == "-" else _guess_format(args.input))
    if args.output:
        output = Path(args.output)
    elif args.input == "-":
        output = Path("output.pdf")
    else:
        output = Path(args.input).with_suffix(".pdf")

    try:
        if args.input == "-":
            markup = sys.stdin.read()
        else:
            markup = Path(args.input).read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.input, exc)
        return 1

    try:
        config = _load_config(args)
        end = render_to_pdf(markup, output, args.width, args.height, fmt=fmt, config=config, margin=args.margin)
    except (MarkupLayoutError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    print(f"{output}: cursor ended at ({end.x:.2f}, {end.y:.2f})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
