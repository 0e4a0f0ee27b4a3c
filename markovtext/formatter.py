#!/usr/bin/env python3
"""
Output Formatter
================
Turns raw generated text into the block that gets printed.

Without a split pattern the text is only trimmed. With one, the text is
cut at every match, keeping the matches themselves as segments, and the
trimmed segments are glued back together with a line break in front of
every long segment. Short punctuation stays attached to the text before
it; longer runs start a new line.
"""

import re
from typing import List, Optional, Union

from markovtext.errors import InvalidSplitPatternError
from markovtext.settings import get_setting

DEFAULT_BREAK_THRESHOLD = 5


def compile_split_pattern(pattern: str) -> re.Pattern:
    """Compile a user-supplied split pattern."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidSplitPatternError(pattern, str(e)) from e


def split_with_delimiters(text: str, pattern: Union[str, re.Pattern]) -> List[str]:
    """
    Split ``text`` on ``pattern``, keeping the delimiters.

    Returns alternating text/delimiter segments. Leading text before the
    first match is always included (possibly empty); trailing text after
    the last match only when non-empty.

    >>> split_with_delimiters("hello. world! foo", "[.!]")
    ['hello', '.', ' world', '!', ' foo']
    """
    if isinstance(pattern, str):
        pattern = compile_split_pattern(pattern)

    segments = []
    pos = 0
    for match in pattern.finditer(text):
        segments.append(text[pos:match.start()])
        segments.append(match.group(0))
        pos = match.end()
    if pos < len(text):
        segments.append(text[pos:])
    return segments


def format_output(text: str,
                  split: Optional[Union[str, re.Pattern]] = None,
                  break_threshold: Optional[int] = None) -> str:
    """
    Format one generated text for output.

    Args:
        text: Raw generated text
        split: Optional delimiter pattern
        break_threshold: Segments longer than this (before trimming) are
            preceded by a line break. Defaults to formatter.break_threshold.

    Returns:
        The formatted block, without a trailing newline
    """
    text = text.strip()
    if split is None:
        return text

    if break_threshold is None:
        break_threshold = get_setting("formatter.break_threshold", DEFAULT_BREAK_THRESHOLD)

    parts = []
    for i, segment in enumerate(split_with_delimiters(text, split)):
        if i > 0 and len(segment) > break_threshold:
            parts.append('\n')
        parts.append(segment.strip())
    return ''.join(parts)
