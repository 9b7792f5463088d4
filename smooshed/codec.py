"""Morse codec: letter patterns and conversions between dot/dash text and bits."""

from __future__ import annotations

from collections.abc import Iterable

from smooshed.constants import ALPHABET, DASH, DOT, MORSE_CODE
from smooshed.errors import DecodeError

Pattern = tuple[bool, ...]

# dot -> False, dash -> True
_PATTERNS: dict[str, Pattern] = {
    letter: tuple(symbol == DASH for symbol in code)
    for letter, code in MORSE_CODE.items()
}


def validate_morse(text: str) -> None:
    """Raise DecodeError at the first character that is not a dot or a dash."""
    for i, ch in enumerate(text):
        if ch != DOT and ch != DASH:
            raise DecodeError(text, i)


def morse_to_bits(text: str) -> Pattern:
    validate_morse(text)
    return tuple(ch == DASH for ch in text)


def bits_to_morse(bits: Iterable[bool]) -> str:
    return "".join(DASH if bit else DOT for bit in bits)


def letter_pattern(letter: str) -> Pattern:
    """Return the bit pattern of a single letter (case-insensitive)."""
    pattern = _PATTERNS.get(letter.lower())
    if pattern is None:
        raise DecodeError(letter, 0)
    return pattern


def letters_to_bits(letters: Iterable[str]) -> Pattern:
    """Concatenate the patterns of a sequence of letters into one bit-vector.

    Raises DecodeError if any element is not one of the 26 letters.
    """
    bits: list[bool] = []
    for letter in letters:
        bits.extend(letter_pattern(letter))
    return tuple(bits)


def encode(text: str) -> str:
    """Smooshed Morse of a word: each letter's code with no separators."""
    parts: list[str] = []
    for i, ch in enumerate(text.lower()):
        code = MORSE_CODE.get(ch)
        if code is None:
            raise DecodeError(text, i)
        parts.append(code)
    return "".join(parts)


def encode_words(words: Iterable[str]) -> list[str]:
    return [encode(word) for word in words]


def smalpha_length() -> int:
    """Length of any smooshed alphabet permutation (the canonical one, encoded)."""
    return len(encode("".join(ALPHABET)))
