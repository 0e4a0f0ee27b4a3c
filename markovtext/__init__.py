#!/usr/bin/env python3
"""
markovtext - Character-Level Markov Text Generator
==================================================

Generates pseudo-random text that imitates the style of its input using a
fixed-order character Markov chain.

Quick Start
-----------
    from markovtext import MarkovChain, normalize

    corpus = normalize(open("book.txt").read())
    chain = MarkovChain(corpus, order=6, seed=42)
    print(chain.generate(100))

Modules
-------
    markovtext.normalizer   - Input cleanup (line filter, ASCII filter, case folding)
    markovtext.codec        - Bytes <-> scalar values
    markovtext.markov_chain - Chain construction and sampling
    markovtext.formatter    - Trimming and regex splitting of output
    markovtext.pipeline     - Per-input orchestration
    markovtext.settings     - app.yaml loader

CLI Usage
---------
    python -m markovtext -f book.txt --lines 5
    python -m markovtext --stdin --order 4 --print-seed
"""

__version__ = "0.1.0"

from .errors import (
    MarkovTextError,
    ConfigurationError,
    InvalidSplitPatternError,
    MalformedTextError,
    DegenerateCorpusError,
)
from .settings import get_setting, load_app_config
from .normalizer import normalize, filter_short_lines, flatten_newlines, strip_non_ascii
from .codec import decode, encode, to_code_points, from_code_points
from .markov_chain import MarkovChain, ChainStats
from .formatter import format_output, split_with_delimiters, compile_split_pattern
from .config import GenerationConfig
from .pipeline import TextGenerator, InputText, read_source, read_stdin

__all__ = [
    '__version__',
    # Errors
    'MarkovTextError',
    'ConfigurationError',
    'InvalidSplitPatternError',
    'MalformedTextError',
    'DegenerateCorpusError',
    # Settings
    'get_setting',
    'load_app_config',
    'GenerationConfig',
    # Components
    'normalize',
    'filter_short_lines',
    'flatten_newlines',
    'strip_non_ascii',
    'decode',
    'encode',
    'to_code_points',
    'from_code_points',
    'MarkovChain',
    'ChainStats',
    'format_output',
    'split_with_delimiters',
    'compile_split_pattern',
    # Pipeline
    'TextGenerator',
    'InputText',
    'read_source',
    'read_stdin',
]
