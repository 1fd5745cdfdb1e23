"""HTML parsing and ``<img>`` discovery."""

from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup

from .config import DEFAULT_ENCODING
from .exceptions import HtmlParseError
from .models import ImageCandidate


def decode_html(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode raw HTML bytes, replacing anything the codec cannot map."""
    return data.decode(encoding, errors="replace")


def parse_html(data: bytes, encoding: str = DEFAULT_ENCODING) -> BeautifulSoup:
    """Build a tolerant tree from possibly malformed HTML bytes.

    ``html5lib`` follows the browser parsing rules: tag and attribute names
    are lowercased, the first of duplicate attributes wins, and markup inside
    ``<textarea>`` or ``<title>`` stays text.
    """
    try:
        return BeautifulSoup(decode_html(data, encoding), "html5lib")
    except LookupError as exc:
        raise HtmlParseError(f"Unknown encoding: {encoding}") from exc
    except Exception as exc:  # pylint: disable=broad-except
        raise HtmlParseError(f"Failed to parse HTML: {exc}") from exc


def iter_image_candidates(soup: BeautifulSoup) -> Iterator[ImageCandidate]:
    """Yield every ``<img>`` with a ``src`` attribute in document order."""
    index = 0
    for img in soup.find_all("img"):
        src = img.get("src")
        if src is None:
            continue
        yield ImageCandidate(src=str(src), index=index)
        index += 1
