"""
Digest encodings.

Pure transforms from raw digest bytes to text, selected by name from a
small closed set.
"""

from __future__ import annotations

import base64
from enum import Enum

from ..core.exceptions import UnknownEncodingError


class Encoding(str, Enum):
    """Supported textual renderings of a digest."""

    HEX = "hex"
    BASE32 = "base32"
    BASE64 = "base64"

    def render(self, digest: bytes) -> str:
        """Render digest bytes in this encoding."""
        return encode(digest, self)


DEFAULT_ENCODING = Encoding.HEX


def encoding_names() -> list[str]:
    """Names accepted by parse_encoding(), in declaration order."""
    return [member.value for member in Encoding]


def parse_encoding(text: str) -> Encoding:
    """
    Map an encoding name to an Encoding.

    Matching is exact and case-sensitive: 'hex' is accepted, 'HEX' is not.

    Raises:
        UnknownEncodingError: If text names no supported encoding
    """
    for member in Encoding:
        if member.value == text:
            return member
    raise UnknownEncodingError(text, supported=encoding_names())


def encode(digest: bytes, encoding: Encoding | str = DEFAULT_ENCODING) -> str:
    """
    Render digest bytes as text.

    hex is lowercase, two characters per byte, no prefix or separators.
    base64 uses the standard alphabet with padding, base32 is RFC 4648
    with padding. A plain name such as "hex" is accepted too.
    """
    try:
        encoding = Encoding(encoding)
    except ValueError:
        raise UnknownEncodingError(str(encoding), supported=encoding_names()) from None

    if encoding is Encoding.HEX:
        return digest.hex()
    if encoding is Encoding.BASE32:
        return base64.b32encode(digest).decode("ascii")
    return base64.b64encode(digest).decode("ascii")
