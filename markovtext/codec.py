#!/usr/bin/env python3
"""
Code-Point Codec
================
Converts between encoded bytes and sequences of Unicode scalar values.

The chain slices its corpus into fixed-width context windows, so it has to
work on whole characters. Slicing bytes would cut multi-byte characters in
half. Decoding is strict by default: malformed input raises instead of
losing bytes.
"""

from typing import Iterable, List, Optional

from markovtext.errors import MalformedTextError
from markovtext.settings import get_setting

SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF
MAX_CODE_POINT = 0x10FFFF


def default_encoding() -> str:
    return get_setting("io.encoding") or "utf-8"


def decode(data: bytes, encoding: Optional[str] = None, source: Optional[str] = None,
           errors: str = "strict") -> str:
    """
    Decode raw bytes into text.

    Args:
        data: Encoded input
        encoding: Codec name (defaults to io.encoding from app.yaml)
        source: Input name used in error messages
        errors: Codec error handler. "surrogateescape" keeps every invalid
            byte as one lone surrogate, for callers that filter afterwards.

    Raises:
        MalformedTextError: on any invalid byte sequence (strict mode)
    """
    encoding = encoding or default_encoding()
    try:
        return data.decode(encoding, errors)
    except UnicodeDecodeError as e:
        raise MalformedTextError(
            f"invalid {e.encoding} byte sequence at offset {e.start}: {e.reason}",
            source=source,
            offset=e.start,
        ) from e


def encode(text: str, encoding: Optional[str] = None) -> bytes:
    """Encode text back into bytes."""
    return text.encode(encoding or default_encoding())


def to_code_points(text: str) -> List[int]:
    return [ord(c) for c in text]


def from_code_points(points: Iterable[int]) -> str:
    """Build text from scalar values, rejecting surrogates and out-of-range values."""
    chars = []
    for i, cp in enumerate(points):
        if cp < 0 or cp > MAX_CODE_POINT or SURROGATE_MIN <= cp <= SURROGATE_MAX:
            raise MalformedTextError(f"not a Unicode scalar value: {cp:#x}", offset=i)
        chars.append(chr(cp))
    return ''.join(chars)
