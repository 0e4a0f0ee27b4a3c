#!/usr/bin/env python3
"""
Generation Pipeline
===================
Wires configuration, normalizer, codec, chain and formatter together.

Data flow per input:
    raw bytes -> decode -> normalize -> MarkovChain -> generate (x lines)
              -> format -> sink

Inputs are handled one at a time in the order given. Each input gets its
own chain and random generator; nothing is shared between inputs.

Usage:
    from markovtext import GenerationConfig, TextGenerator, read_source

    generator = TextGenerator(GenerationConfig(order=4, lines=3, seed=1))
    generator.process(read_source("corpus.txt"), sys.stdout)
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, TextIO

from markovtext.codec import decode
from markovtext.config import GenerationConfig
from markovtext.errors import DegenerateCorpusError
from markovtext.formatter import format_output
from markovtext.markov_chain import MarkovChain
from markovtext.normalizer import normalize

logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"


# =============================================================================
# Input
# =============================================================================

@dataclass
class InputText:
    """One raw input blob and where it came from."""
    name: str
    data: bytes


def read_source(path) -> InputText:
    """Read an input file as raw bytes."""
    path = Path(path)
    return InputText(name=str(path), data=path.read_bytes())


def read_stdin(stream: Optional[BinaryIO] = None) -> InputText:
    """Read all of standard input. Every line ends up newline-terminated."""
    if stream is None:
        stream = sys.stdin.buffer
    data = stream.read()
    if data and not data.endswith(b'\n'):
        data += b'\n'
    return InputText(name=STDIN_NAME, data=data)


# =============================================================================
# Generator
# =============================================================================

class TextGenerator:
    """Runs the full pipeline for each input under one configuration."""

    def __init__(self, config: Optional[GenerationConfig] = None):
        self.config = config or GenerationConfig()

    def prepare(self, source: InputText) -> str:
        """
        Decode and normalize one input.

        With the ASCII filter on, bytes that don't decode are kept as lone
        surrogates and then stripped with everything else outside the
        allow-list, the same as filtering the raw bytes.
        """
        errors = "surrogateescape" if self.config.ascii_only else "strict"
        text = decode(source.data, source=source.name, errors=errors)
        return normalize(
            text,
            min_line=self.config.min_line,
            ascii_only=self.config.ascii_only,
        )

    def build_chain(self, corpus: str) -> MarkovChain:
        return MarkovChain(corpus, self.config.order, seed=self.config.seed)

    def generate_lines(self, chain: MarkovChain) -> Iterator[str]:
        """Yield ``config.lines`` formatted blocks from ``chain``."""
        for _ in range(self.config.lines):
            yield format_output(chain.generate(self.config.length), split=self.config.split)

    def process(self, source: InputText, out: TextIO) -> int:
        """
        Process one input and write its output to ``out``.

        Returns:
            Number of generated blocks written

        Raises:
            MalformedTextError: input is not valid text
            DegenerateCorpusError: nothing to generate from
        """
        corpus = self.prepare(source)
        logger.debug("%s: %d chars after normalization", source.name, len(corpus))

        if self.config.dump_input:
            out.write(f"{corpus}\n")
            return 0

        chain = self.build_chain(corpus)
        if self.config.print_seed:
            out.write(f"Seed: {chain.seed}\n")

        try:
            chain.ensure_generatable()
        except DegenerateCorpusError as e:
            raise DegenerateCorpusError(f"{source.name}: {e}") from e

        written = 0
        for block in self.generate_lines(chain):
            out.write(f"{block}\n")
            written += 1
        return written
