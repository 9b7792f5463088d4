"""Exception types raised by the codec, input validation and search engine."""

from __future__ import annotations

from enum import Enum


class DecodeError(ValueError):
    """Text contains a symbol the Morse codec does not know."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(
            f"Invalid character {text[position:position + 1]!r} at position {position} in {text!r}"
        )


class ValidationKind(Enum):
    INVALID_CHARACTER = "invalid_character"
    WRONG_LENGTH = "wrong_length"


class ValidationError(ValueError):
    """A smooshed alphabet was rejected before the search started."""

    def __init__(self, kind: ValidationKind, smalpha: str, message: str) -> None:
        self.kind = kind
        self.smalpha = smalpha
        super().__init__(message)


class InternalInvariantViolation(RuntimeError):
    """The engine produced a candidate the codec could not encode (a bug)."""
