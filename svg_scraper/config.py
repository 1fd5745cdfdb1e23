"""Configuration objects and constants for SVG extraction."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

SVG_DATA_URI_PREFIX = "data:image/svg+xml;base64,"
DEFAULT_OUTPUT_SUBDIR = "images"
OUTPUT_FILENAME_TEMPLATE = "svg_image_{ordinal}.svg"
DONE_MESSAGE = "All SVG images have been downloaded."
DEFAULT_ENCODING = "utf-8"


@dataclass
class ExtractConfig:
    """Settings for a single extraction run."""

    input_path: Path
    output_dir: Optional[Path] = None
    encoding: str = DEFAULT_ENCODING
    lenient_prefix: bool = False
