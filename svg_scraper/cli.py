"""Command-line entry point for the SVG scraper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_ENCODING
from .pipeline import extract
from .sinks import StreamSink

logger = logging.getLogger("svg_scraper.cli")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract base64-encoded SVG images embedded in an HTML file.",
    )
    parser.add_argument("input", type=Path, help="HTML file to scan")
    parser.add_argument(
        "--output",
        default=None,
        help="Directory where SVG files are written (default: <input dir>/images)",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Text encoding used to read the HTML file",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Also accept data URIs with extra parameters or different casing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(list(sys.argv[1:] if argv is None else argv))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    input_path: Path = args.input
    if not input_path.is_file():
        sys.stderr.write(f"Invalid file: {input_path}\n")
        return EXIT_USAGE

    logger.debug("Processing file: %s", input_path)
    result = extract(
        input_path,
        args.output,
        StreamSink(),
        encoding=args.encoding,
        lenient_prefix=args.lenient,
    )
    if not result.ok:
        return EXIT_FAILED

    logger.info("Processing complete. Output directory: %s", result.output_dir)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
