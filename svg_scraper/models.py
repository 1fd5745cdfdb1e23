"""Data models used throughout the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


class ProgressKind:
    """Kinds of progress events emitted by the pipeline."""

    SAVED = "saved"
    DONE = "done"
    ERROR = "error"


@dataclass(frozen=True)
class InputDocument:
    """HTML document read from disk and its parsed tree."""

    path: Path
    raw: bytes
    root: Any


@dataclass(frozen=True)
class ImageCandidate:
    """An ``<img>`` element carrying a ``src`` attribute."""

    src: str
    index: int


@dataclass(frozen=True)
class SvgPayload:
    """Decoded SVG bytes for a qualifying image."""

    ordinal: int
    data: bytes


@dataclass(frozen=True)
class OutputFile:
    """SVG file written to disk."""

    path: Path
    size: int


@dataclass(frozen=True)
class ProgressEvent:
    """Single message delivered to a progress sink."""

    kind: str
    message: str
