"""
Tests for Markov Chain Model
============================
Tests for chain construction, anchor selection and generation in
markovtext/markov_chain.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from markovtext.markov_chain import MarkovChain, ChainStats, SEED_BITS
from markovtext.errors import ConfigurationError, DegenerateCorpusError

CAT_TEXT = "the cat sat on the mat. the cat ran."

# Every context has exactly one successor and " ab" is the only anchor,
# so the walk is the same for any seed.
LINEAR_TEXT = " abcdefg"


class TestBuild:
    """Tests for table construction."""

    def test_table_contents(self):
        chain = MarkovChain("abcabd", order=2, seed=1)
        assert chain.contexts == ["ab", "bc", "ca"]
        assert chain.successors("ab") == ["c", "d"]
        assert chain.successors("bc") == ["a"]
        assert chain.successors("ca") == ["b"]

    def test_duplicates_retained(self):
        chain = MarkovChain("aaaa", order=1, seed=1)
        assert chain.successors("a") == ["a", "a", "a"]

    @pytest.mark.parametrize("order", [1, 2, 3, 6])
    def test_keys_have_order_length_and_values_non_empty(self, order):
        chain = MarkovChain(CAT_TEXT, order=order, seed=1)
        assert not chain.is_empty
        for context in chain.contexts:
            assert len(context) == order
            assert context in CAT_TEXT
            assert chain.successors(context)

    @pytest.mark.parametrize("corpus", ["", "a", "ab", "abc"])
    def test_short_corpus_gives_empty_table(self, corpus):
        chain = MarkovChain(corpus, order=3, seed=1)
        assert chain.is_empty
        assert len(chain) == 0

    def test_one_past_order_gives_one_entry(self):
        chain = MarkovChain("abcd", order=3, seed=1)
        assert chain.contexts == ["abc"]
        assert chain.successors("abc") == ["d"]

    def test_invalid_order(self):
        with pytest.raises(ConfigurationError):
            MarkovChain(CAT_TEXT, order=0)

    def test_build_classmethod(self):
        chain = MarkovChain.build(CAT_TEXT, 3, seed=9)
        assert chain.order == 3
        assert chain.seed == 9

    def test_successors_of_unknown_context(self):
        chain = MarkovChain(CAT_TEXT, order=3, seed=1)
        assert chain.successors("zzz") == []
        assert "zzz" not in chain
        assert "the" in chain

    def test_stats(self):
        stats = MarkovChain("abcabd", order=2, seed=1).stats()
        assert stats == ChainStats(contexts=3, transitions=4, anchors=0)

    def test_multibyte_characters_are_single_units(self):
        chain = MarkovChain(" über über", order=2, seed=1)
        assert chain.successors(" ü") == ["b", "b"]


class TestSeed:
    """Tests for seed handling."""

    def test_explicit_seed_retained(self):
        assert MarkovChain(CAT_TEXT, order=3, seed=12345).seed == 12345

    def test_random_seed_drawn_when_missing(self):
        seed = MarkovChain(CAT_TEXT, order=3).seed
        assert isinstance(seed, int)
        assert 0 <= seed < 2 ** SEED_BITS

    def test_negative_seed_retained(self):
        assert MarkovChain(CAT_TEXT, order=3, seed=-5).seed == -5

    def test_negative_seeds_differ_from_positive(self):
        corpus = " " + " ".join(f"w{i}x" for i in range(50))
        positive = [MarkovChain(corpus, order=2, seed=s).generate(10) for s in range(1, 30)]
        negative = [MarkovChain(corpus, order=2, seed=-s).generate(10) for s in range(1, 30)]
        assert positive != negative

    def test_negative_seed_is_twos_complement(self):
        a = MarkovChain(CAT_TEXT, order=3, seed=-1)
        b = MarkovChain(CAT_TEXT, order=3, seed=2 ** SEED_BITS - 1)
        assert [a.generate(20) for _ in range(5)] == [b.generate(20) for _ in range(5)]


class TestAnchors:
    """Tests for anchor selection."""

    def test_anchors_start_with_space(self):
        chain = MarkovChain(CAT_TEXT, order=3, seed=1)
        assert chain.anchors
        assert all(a.startswith(' ') for a in chain.anchors)

    def test_choose_anchor_always_space_prefixed(self):
        chain = MarkovChain(CAT_TEXT, order=4, seed=3)
        for _ in range(50):
            assert chain.choose_anchor().startswith(' ')

    def test_no_anchor_raises(self):
        chain = MarkovChain("abcdef", order=2, seed=1)
        assert not chain.is_empty
        with pytest.raises(DegenerateCorpusError):
            chain.generate(10)

    def test_ensure_generatable_keeps_random_state(self):
        a = MarkovChain(CAT_TEXT, order=3, seed=5)
        b = MarkovChain(CAT_TEXT, order=3, seed=5)
        a.ensure_generatable()
        assert a.generate(30) == b.generate(30)


class TestGenerate:
    """Tests for generate()."""

    def test_golden_linear_walk(self):
        chain = MarkovChain(LINEAR_TEXT, order=3, seed=0)
        assert chain.generate(20) == " abcdefg"

    def test_golden_cat_corpus(self):
        """Fixed output for a branching corpus; guards the draw order."""
        chain = MarkovChain(CAT_TEXT, order=3, seed=7)
        assert chain.generate(20) == " on the cat sat sat sat"
        assert chain.generate(20) == " ran."

    def test_stops_at_length(self):
        chain = MarkovChain(LINEAR_TEXT, order=3, seed=0)
        assert chain.generate(2) == " abcde"

    def test_zero_length_returns_anchor(self):
        chain = MarkovChain(LINEAR_TEXT, order=3, seed=0)
        assert chain.generate(0) == " ab"

    def test_empty_table_refuses(self):
        chain = MarkovChain("hi", order=6, seed=1)
        with pytest.raises(DegenerateCorpusError):
            chain.generate(100)

    def test_deterministic_with_seed(self):
        """Same corpus, order, seed and length give the same text."""
        a = MarkovChain(CAT_TEXT, order=3, seed=2024)
        b = MarkovChain(CAT_TEXT, order=3, seed=2024)
        assert [a.generate(20) for _ in range(5)] == [b.generate(20) for _ in range(5)]

    def test_different_seeds_can_differ(self):
        corpus = " " + " ".join(f"w{i}x" for i in range(50))
        outputs = {MarkovChain(corpus, order=2, seed=s).generate(5) for s in range(20)}
        assert len(outputs) > 1

    @pytest.mark.parametrize("seed", range(10))
    def test_length_bounds(self, seed):
        chain = MarkovChain(CAT_TEXT, order=3, seed=seed)
        text = chain.generate(20)
        assert 3 <= len(text) <= 23

    @pytest.mark.parametrize("seed", range(10))
    def test_every_transition_seen_in_corpus(self, seed):
        order = 3
        text = MarkovChain(CAT_TEXT, order=order, seed=seed).generate(20)
        assert text.startswith(' ')
        for j in range(len(text) - order):
            assert text[j:j + order + 1] in CAT_TEXT
