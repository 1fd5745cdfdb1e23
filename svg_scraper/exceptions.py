"""Errors raised while extracting SVG images."""

from __future__ import annotations


class SvgScraperError(Exception):
    """Base class for extraction failures."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InputReadError(SvgScraperError):
    """The input HTML file is missing or unreadable."""

    kind = "input-io"


class OutputWriteError(SvgScraperError):
    """The output directory or an SVG file could not be written."""

    kind = "output-io"


class SvgDecodeError(SvgScraperError):
    """A data URI payload is not valid base64."""

    kind = "decode"


class HtmlParseError(SvgScraperError):
    """The HTML parser failed outright."""

    kind = "parse"
