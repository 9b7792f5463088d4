"""Random alphabet orderings, used for demo puzzles and to seed search order."""

from __future__ import annotations

import random

from smooshed.codec import encode
from smooshed.constants import ALPHABET


def random_alphabet(rng: random.Random | None = None, seed: int | None = None) -> str:
    """Return the 26 letters in a uniformly random order.

    Pass *rng* to share a generator across calls, or *seed* for a
    one-off deterministic shuffle. Neither gives an unseeded shuffle.
    """
    if rng is None:
        rng = random.Random(seed)
    letters = list(ALPHABET)
    rng.shuffle(letters)
    return "".join(letters)


def random_smalpha(rng: random.Random | None = None,
                   seed: int | None = None) -> tuple[str, str]:
    """Return ``(alphabet, smooshed_morse)`` for a random, always solvable puzzle."""
    alphabet = random_alphabet(rng, seed)
    return alphabet, encode(alphabet)
