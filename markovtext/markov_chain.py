#!/usr/bin/env python3
"""
Character-Level Markov Chain
============================
Learns which characters follow each fixed-width context in a corpus and
generates new text by walking those transitions at random.

Theory:
-------
The chain models P(next_char | previous ``order`` chars). Successor lists
keep duplicates, so sampling uniformly from a list reproduces the observed
frequencies without storing counts. Higher orders copy longer runs of the
source verbatim; lower orders drift into gibberish sooner.

Generation starts at an "anchor": a context beginning with a space, i.e.
something that sat at a word or line boundary in the normalized corpus.
That gives openings that look like the start of a word instead of the
middle of one.
"""

import logging
import random
import secrets
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from markovtext.errors import ConfigurationError, DegenerateCorpusError

logger = logging.getLogger(__name__)

ANCHOR_PREFIX = ' '
SEED_BITS = 64
SEED_MASK = (1 << SEED_BITS) - 1
SEED_MIN = -(1 << (SEED_BITS - 1))
SEED_MAX = SEED_MASK


def random_seed() -> int:
    """Draw a fresh seed from the OS entropy source."""
    return secrets.randbits(SEED_BITS)


@dataclass
class ChainStats:
    """Size summary of a built chain."""
    contexts: int
    transitions: int
    anchors: int


class MarkovChain:
    """
    Fixed-order character Markov chain over a single corpus.

    Each chain owns its own seeded random generator, so two chains built
    from the same corpus, order and seed produce the same sequence of
    outputs.

    Example:
        chain = MarkovChain(" the cat sat on the mat", order=3, seed=42)
        text = chain.generate(50)
    """

    def __init__(self, corpus: str, order: int, seed: Optional[int] = None):
        if order < 1:
            raise ConfigurationError(f"order must be at least 1, got {order}")

        self.order = order
        self.seed = random_seed() if seed is None else seed
        # Seed with the 64-bit two's-complement value; negative seeds stay distinct.
        self._rng = random.Random(self.seed & SEED_MASK)
        self._table: Dict[str, List[str]] = self._build_table(corpus, order)
        self._anchors = [ctx for ctx in self._table if ctx.startswith(ANCHOR_PREFIX)]

        logger.debug(
            "Built order-%d chain from %d chars: %d contexts, %d anchors (seed %d)",
            order, len(corpus), len(self._table), len(self._anchors), self.seed,
        )

    @classmethod
    def build(cls, corpus: str, order: int, seed: Optional[int] = None) -> 'MarkovChain':
        return cls(corpus, order, seed)

    @staticmethod
    def _build_table(corpus: str, order: int) -> Dict[str, List[str]]:
        """Slide a window of ``order`` chars over the corpus and record what follows."""
        table = defaultdict(list)
        for i in range(len(corpus) - order):
            table[corpus[i:i + order]].append(corpus[i + order])
        return dict(table)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, context: str) -> bool:
        return context in self._table

    @property
    def is_empty(self) -> bool:
        return not self._table

    @property
    def contexts(self) -> List[str]:
        return list(self._table)

    @property
    def anchors(self) -> List[str]:
        """Contexts generation may start from."""
        return list(self._anchors)

    def successors(self, context: str) -> List[str]:
        """Observed successors of ``context`` (empty if never seen)."""
        return list(self._table.get(context, ()))

    def stats(self) -> ChainStats:
        return ChainStats(
            contexts=len(self._table),
            transitions=sum(len(v) for v in self._table.values()),
            anchors=len(self._anchors),
        )

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def ensure_generatable(self):
        """
        Raise if generate() cannot start. Does not touch the random state.

        Raises:
            DegenerateCorpusError: if the table is empty or has no anchors
        """
        if self.is_empty:
            raise DegenerateCorpusError(
                f"corpus is too short for an order-{self.order} chain"
            )
        if not self._anchors:
            raise DegenerateCorpusError(
                "corpus has no context starting with a space to anchor generation"
            )

    def choose_anchor(self) -> str:
        """Pick a random space-prefixed context to start from."""
        self.ensure_generatable()
        return self._anchors[self._rng.randrange(len(self._anchors))]

    def generate(self, length: int) -> str:
        """
        Generate text starting from a random anchor.

        Args:
            length: Maximum number of characters appended after the anchor

        Returns:
            The anchor followed by up to ``length`` sampled characters.
            Stops early when the current context was never seen.
        """
        result = list(self.choose_anchor())

        for i in range(length):
            # Window advances one position per step, like the build slide.
            context = ''.join(result[i:i + self.order])
            successors = self._table.get(context)
            if not successors:
                break
            result.append(successors[self._rng.randrange(len(successors))])

        return ''.join(result)
