"""
Exceptions
==========
Error taxonomy for markovtext.

Library code raises these; the CLI catches them per input and reports
them on stderr. Early generation stop on an unseen context is normal and
never raises.
"""

from typing import Optional


class MarkovTextError(Exception):
    """Base class for all markovtext errors."""


class ConfigurationError(MarkovTextError, ValueError):
    """A run parameter is missing or out of range."""


class InvalidSplitPatternError(ConfigurationError):
    """The --split value is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid split pattern {pattern!r}: {reason}")


class MalformedTextError(MarkovTextError):
    """Input bytes could not be decoded into scalar values."""

    def __init__(self, message: str, source: Optional[str] = None,
                 offset: Optional[int] = None):
        self.source = source
        self.offset = offset
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


class DegenerateCorpusError(MarkovTextError):
    """The chain has nothing to generate from."""
