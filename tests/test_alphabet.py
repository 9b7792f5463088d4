"""Tests for random alphabet generation."""

from __future__ import annotations

import random

from smooshed.alphabet import random_alphabet, random_smalpha
from smooshed.codec import encode, smalpha_length
from smooshed.constants import ALPHABET


class TestRandomAlphabet:
    def test_is_permutation(self) -> None:
        r = random_alphabet()
        assert len(r) == 26
        assert sorted(r) == list(ALPHABET)

    def test_seed_reproducible(self) -> None:
        assert random_alphabet(seed=42) == random_alphabet(seed=42)

    def test_shared_rng_advances(self) -> None:
        rng = random.Random(1)
        first = random_alphabet(rng)
        second = random_alphabet(rng)
        assert sorted(first) == sorted(second)
        assert first != second

    def test_rng_takes_precedence_over_seed(self) -> None:
        assert random_alphabet(random.Random(5), seed=99) == random_alphabet(seed=5)


class TestRandomSmalpha:
    def test_encoding_matches(self) -> None:
        alphabet, morse = random_smalpha(seed=7)
        assert encode(alphabet) == morse
        assert len(morse) == smalpha_length()
