"""Persistence of decoded SVG payloads."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import OUTPUT_FILENAME_TEMPLATE
from .exceptions import OutputWriteError
from .models import OutputFile, SvgPayload

logger = logging.getLogger("svg_scraper")


def svg_filename(ordinal: int) -> str:
    return OUTPUT_FILENAME_TEMPLATE.format(ordinal=ordinal)


def ensure_output_dir(output_dir: Path) -> Path:
    """Create ``output_dir`` and any missing parents."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(
            f"Cannot create output directory {output_dir}: {exc.strerror or exc}"
        ) from exc
    return output_dir


def write_svg(output_dir: Path, payload: SvgPayload) -> OutputFile:
    """Write ``payload`` verbatim as ``svg_image_<N>.svg``, replacing any existing file."""
    destination = (output_dir / svg_filename(payload.ordinal)).absolute()
    try:
        destination.write_bytes(payload.data)
    except OSError as exc:
        raise OutputWriteError(
            f"Cannot write {destination}: {exc.strerror or exc}"
        ) from exc
    logger.debug("Wrote %d bytes to %s", len(payload.data), destination)
    return OutputFile(path=destination, size=len(payload.data))
