#!/usr/bin/env python3
"""
Run Configuration
=================
Per-run generation parameters.

Unset fields are filled from the ``generation`` section of app.yaml, the
same way every other tunable in this package is resolved. Command-line
flags are passed in explicitly and win over the file.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from markovtext.errors import ConfigurationError
from markovtext.formatter import compile_split_pattern
from markovtext.markov_chain import SEED_MAX, SEED_MIN
from markovtext.settings import get_setting


@dataclass
class GenerationConfig:
    """Parameters for processing one or more inputs.

    Treated as read-only once built; nothing in the pipeline mutates it.
    """
    order: Optional[int] = None           # Context length in characters
    length: Optional[int] = None          # Max characters appended after the anchor
    lines: Optional[int] = None           # Lines generated per input
    min_line: Optional[int] = None        # Drop shorter lines (0 = off)
    seed: Optional[int] = None            # None = draw from the OS
    ascii_only: bool = False
    split: Optional[Union[str, re.Pattern]] = None
    dump_input: bool = False
    print_seed: bool = False

    def __post_init__(self):
        cfg = get_setting("generation", {}) or {}
        if self.order is None:
            self.order = cfg.get("order")
        if self.length is None:
            self.length = cfg.get("length")
        if self.lines is None:
            self.lines = cfg.get("lines")
        if self.min_line is None:
            self.min_line = cfg.get("min_line", 0)

        missing = [
            name for name, value in (
                ("order", self.order),
                ("length", self.length),
                ("lines", self.lines),
            )
            if value is None
        ]
        if missing:
            raise ConfigurationError(f"generation settings missing in app.yaml: {', '.join(missing)}")

        if self.order < 1:
            raise ConfigurationError(f"order must be at least 1, got {self.order}")
        for name in ("length", "lines", "min_line"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.seed is not None and not SEED_MIN <= self.seed <= SEED_MAX:
            raise ConfigurationError(f"seed must fit in 64 bits, got {self.seed}")

        if isinstance(self.split, str):
            self.split = compile_split_pattern(self.split)
