#!/usr/bin/env python3
"""
Text Normalizer
===============
Prepares raw input text for chain construction.

Steps, in order:
- drop short and empty lines (only when a minimum length is set)
- flatten newlines to spaces so contexts can span line boundaries
- optionally strip everything outside a small ASCII allow-list
- fold to lowercase

The result may be empty; callers have to cope with a degenerate corpus.
"""

from typing import Optional

from markovtext.settings import get_setting

DEFAULT_ASCII_CHARS = (
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "'\".,-_:;!?() "
)


def ascii_allow_list() -> frozenset:
    """Characters kept by strip_non_ascii()."""
    chars = get_setting("normalizer.ascii_chars") or DEFAULT_ASCII_CHARS
    return frozenset(chars)


def filter_short_lines(text: str, min_line: int) -> str:
    """Remove empty lines and lines shorter than ``min_line``.

    A ``min_line`` of 0 disables filtering and returns the text untouched.
    """
    if not min_line:
        return text
    kept = [line for line in text.split('\n') if line and len(line) >= min_line]
    return '\n'.join(kept)


def flatten_newlines(text: str) -> str:
    return text.replace('\n', ' ')


def strip_non_ascii(text: str, allowed: Optional[frozenset] = None) -> str:
    """Keep only characters from the ASCII allow-list."""
    if allowed is None:
        allowed = ascii_allow_list()
    return ''.join(c for c in text if c in allowed)


def normalize(text: str, min_line: int = 0, ascii_only: bool = False) -> str:
    """Run every normalization step on ``text``."""
    text = filter_short_lines(text, min_line)
    text = flatten_newlines(text)
    if ascii_only:
        text = strip_non_ascii(text)
    return text.lower()
