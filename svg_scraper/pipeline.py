"""High-level orchestration for extracting embedded SVG images."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .config import DEFAULT_ENCODING, DEFAULT_OUTPUT_SUBDIR, DONE_MESSAGE, ExtractConfig
from .content import iter_image_candidates, parse_html
from .decoder import decode_svg_data_uri
from .exceptions import InputReadError, SvgScraperError
from .models import InputDocument, OutputFile, ProgressKind, SvgPayload
from .sinks import ProgressSink
from .writer import ensure_output_dir, write_svg

logger = logging.getLogger("svg_scraper")

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class ExtractionResult:
    """Summary of a finished run."""

    output_dir: Path
    files: List[OutputFile] = field(default_factory=list)
    error: Optional[str] = None
    total_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


def resolve_output_dir(input_path: Path, output_dir: Optional[PathLike]) -> Path:
    """Return ``output_dir``, or ``<input dir>/images`` when it is empty."""
    if output_dir is None or not os.fspath(output_dir):
        return input_path.absolute().parent / DEFAULT_OUTPUT_SUBDIR
    return Path(output_dir).absolute()


def load_document(input_path: Path, encoding: str = DEFAULT_ENCODING) -> InputDocument:
    """Read and parse the HTML file at ``input_path``."""
    try:
        raw = input_path.read_bytes()
    except OSError as exc:
        raise InputReadError(
            f"Cannot read {input_path}: {exc.strerror or exc}"
        ) from exc
    logger.debug("Read %d bytes from %s", len(raw), input_path)
    return InputDocument(path=input_path.absolute(), raw=raw, root=parse_html(raw, encoding))


def run(config: ExtractConfig, sink: ProgressSink) -> ExtractionResult:
    """Extract every base64 SVG data URI in ``config.input_path``.

    Failures are reported once through ``sink`` as an ``error`` event and
    recorded on the returned result; they are never raised.
    """
    start = time.perf_counter()
    input_path = Path(config.input_path)
    output_dir = resolve_output_dir(input_path, config.output_dir)
    result = ExtractionResult(output_dir=output_dir)
    logger.info("Extracting SVG images from %s into %s", input_path, output_dir)

    try:
        document = load_document(input_path, config.encoding)
        ensure_output_dir(output_dir)

        ordinal = 0
        for candidate in iter_image_candidates(document.root):
            data = decode_svg_data_uri(candidate.src, lenient=config.lenient_prefix)
            if data is None:
                logger.debug("Skipping image #%d: not an SVG data URI", candidate.index)
                continue
            ordinal += 1
            payload = SvgPayload(ordinal=ordinal, data=data)
            output = write_svg(output_dir, payload)
            result.files.append(output)
            sink(ProgressKind.SAVED, f"Saved: {output.path}")
    except SvgScraperError as exc:
        result.error = f"Error: {exc}"
        result.total_seconds = time.perf_counter() - start
        logger.error("Extraction from %s failed (%s): %s", input_path, exc.kind, exc)
        sink(ProgressKind.ERROR, result.error)
        return result

    result.total_seconds = time.perf_counter() - start
    logger.info(
        "Extracted %d SVG image(s) in %.2fs", len(result.files), result.total_seconds
    )
    sink(ProgressKind.DONE, DONE_MESSAGE)
    return result


def extract(
    input_path: PathLike,
    output_dir: Optional[PathLike],
    progress_sink: ProgressSink,
    *,
    encoding: str = DEFAULT_ENCODING,
    lenient_prefix: bool = False,
) -> ExtractionResult:
    """Entry point for UI and command-line callers.

    An empty or missing ``output_dir`` resolves to an ``images`` directory
    next to the input file.
    """
    config = ExtractConfig(
        input_path=Path(input_path),
        output_dir=None if output_dir is None or not os.fspath(output_dir) else Path(output_dir),
        encoding=encoding,
        lenient_prefix=lenient_prefix,
    )
    return run(config, progress_sink)
