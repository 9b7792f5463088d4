"""Shared fixtures for smooshed Morse tests."""

from __future__ import annotations

import random

import pytest

from smooshed.codec import encode
from smooshed.constants import ALPHABET


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so search order is reproducible."""
    return random.Random(380)


@pytest.fixture
def canonical_smalpha() -> str:
    """Smooshed Morse of "abcdefghijklmnopqrstuvwxyz"."""
    return encode("".join(ALPHABET))


@pytest.fixture
def known_smalpha() -> str:
    """A valid smooshed permutation from the daily programmer challenge."""
    return ".--...-.-.-.....-.--........----.-.-..---.---.--.--.-.-....-..-...-.---..--.----.."


@pytest.fixture
def small_letters() -> str:
    """Five letters with short, overlapping patterns: e . t - i .. a .- n -."""
    return "etian"


@pytest.fixture
def malformed_inputs() -> list[str]:
    return ["", " ", "-!.-", "-abc-", "-..-"]
