"""Recognition and decoding of base64 SVG data URIs."""

from __future__ import annotations

import base64
import binascii
import re
from typing import Optional

from .config import SVG_DATA_URI_PREFIX
from .exceptions import SvgDecodeError

# data:image/svg+xml[;param=value...];base64,
LENIENT_PREFIX_PATTERN = re.compile(
    r"^data:image/svg\+xml(?:;[^,;]*)*?;base64,", re.IGNORECASE
)
_WHITESPACE = re.compile(r"[ \t\r\n\f]+")


def is_svg_data_uri(src: str, lenient: bool = False) -> bool:
    """Return True when ``src`` is a base64-encoded SVG data URI."""
    if lenient:
        return LENIENT_PREFIX_PATTERN.match(src) is not None
    return src.startswith(SVG_DATA_URI_PREFIX)


def extract_payload(src: str) -> str:
    """Return the portion of a data URI after its first comma."""
    _, _, payload = src.partition(",")
    return payload


def decode_payload(payload: str) -> bytes:
    """Strictly decode a base64 payload, ignoring embedded whitespace."""
    compact = _WHITESPACE.sub("", payload)
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SvgDecodeError(f"Invalid base64 SVG payload: {exc}") from exc


def decode_svg_data_uri(src: str, lenient: bool = False) -> Optional[bytes]:
    """Decode ``src`` if it qualifies, otherwise return None."""
    if not is_svg_data_uri(src, lenient=lenient):
        return None
    return decode_payload(extract_payload(src))
