"""Progress sink abstractions."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Protocol, TextIO, runtime_checkable

from .models import ProgressEvent, ProgressKind

logger = logging.getLogger("svg_scraper")


@runtime_checkable
class ProgressSink(Protocol):
    """Consumer of ``(kind, message)`` progress pairs."""

    def __call__(self, kind: str, message: str) -> None: ...


class CollectingSink:
    """Keep every event in memory."""

    def __init__(self) -> None:
        self.events: List[ProgressEvent] = []

    def __call__(self, kind: str, message: str) -> None:
        self.events.append(ProgressEvent(kind=kind, message=message))

    @property
    def kinds(self) -> List[str]:
        return [event.kind for event in self.events]

    def messages(self, kind: Optional[str] = None) -> List[str]:
        return [
            event.message
            for event in self.events
            if kind is None or event.kind == kind
        ]


class StreamSink:
    """Print each message on its own line."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def __call__(self, kind: str, message: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(message + "\n")
        stream.flush()


class LoggingSink:
    """Forward events to the ``svg_scraper`` logger."""

    def __call__(self, kind: str, message: str) -> None:
        if kind == ProgressKind.ERROR:
            logger.error("%s", message)
        else:
            logger.info("%s", message)
