"""Segmented backtracking search for a smooshed Morse alphabet permutation."""

from __future__ import annotations

import random
import time
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from smooshed.alphabet import random_alphabet, random_smalpha
from smooshed.codec import bits_to_morse, morse_to_bits, smalpha_length, validate_morse
from smooshed.constants import CLOCK_CHECK_INTERVAL, DEFAULT_CHUNK_LIMIT
from smooshed.errors import DecodeError, ValidationError, ValidationKind
from smooshed.frame import SearchFrame


class SearchStatus(Enum):
    FOUND = "found"
    EXHAUSTED = "exhausted"
    TIMEOUT = "timeout"


@dataclass
class SearchResult:
    """Outcome of one search. ``permutation`` is set only when FOUND."""
    status: SearchStatus
    permutation: str | None = None
    steps: int = 0
    max_depth: int = 0
    elapsed: float = 0.0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


def validate_smalpha(smalpha: str) -> None:
    """Reject input that cannot be the smooshed encoding of an alphabet permutation."""
    try:
        validate_morse(smalpha)
    except DecodeError as exc:
        raise ValidationError(ValidationKind.INVALID_CHARACTER, smalpha, str(exc)) from exc

    expected = smalpha_length()
    if len(smalpha) != expected:
        raise ValidationError(
            ValidationKind.WRONG_LENGTH, smalpha,
            f"{smalpha!r} length is {len(smalpha)}, must be {expected}",
        )


def check_for_match(target: Sequence[bool], frames: Sequence[SearchFrame],
                    complete: bool = False) -> bool:
    """True if every frame's pattern matches the target, in order, from offset 0.

    A frame whose pattern would run past the end of the target never
    matches, and neither does a frame with nothing committed. With
    *complete*, the patterns must also cover the whole target.
    """
    offset = 0
    for frame in frames:
        if not frame.committed:
            return False
        end = offset + len(frame.pattern)
        if end > len(target):
            return False
        if tuple(target[offset:end]) != frame.pattern:
            return False
        offset = end
    if complete:
        return offset == len(target)
    return True


def get_taken(frames: Sequence[SearchFrame]) -> str:
    """Letters committed so far, root to top."""
    return "".join(frame.letters for frame in frames)


def search(target: Sequence[bool] | str,
           chunk_limit: int = DEFAULT_CHUNK_LIMIT,
           *,
           letters: Sequence[str] | None = None,
           rng: random.Random | None = None,
           seed: int | None = None,
           max_steps: int | None = None,
           timeout: float | None = None,
           quiet: bool = False) -> SearchResult:
    """Find a permutation of *letters* (default: the alphabet) whose smooshed
    Morse equals *target*.

    The search keeps an explicit stack of frames. Each frame tries orderings
    of up to *chunk_limit* letters from its pool; a candidate that keeps the
    whole stack consistent with the target pushes a child frame over the
    letters left, and an exhausted frame is popped so its parent tries its
    next candidate. *max_steps* bounds the number of candidates tried and
    *timeout* the wall-clock seconds; hitting either returns TIMEOUT.
    """
    if isinstance(target, str):
        target = morse_to_bits(target)
    target = tuple(target)
    if rng is None:
        rng = random.Random(seed)

    if letters is None:
        order = random_alphabet(rng)
    else:
        shuffled = list(letters)
        rng.shuffle(shuffled)
        order = "".join(shuffled)

    start_time = time.time()
    stack: list[SearchFrame] = [SearchFrame.create(order, chunk_limit, target)]
    steps = 0
    max_depth = 0

    def _result(status: SearchStatus, permutation: str | None = None) -> SearchResult:
        return SearchResult(status, permutation, steps, max_depth,
                            time.time() - start_time)

    if not quiet:
        print(f"Trying to find source alphabet permutation for '{bits_to_morse(target)}'")

    while stack:
        if max_steps is not None and steps >= max_steps:
            if not quiet:
                print(f"Step budget of {max_steps} exhausted at level #{len(stack) - 1}. "
                      f"Matched so far: {get_taken(stack[:-1])}")
            return _result(SearchStatus.TIMEOUT)
        if (timeout is not None and steps % CLOCK_CHECK_INTERVAL == 0
                and time.time() - start_time > timeout):
            if not quiet:
                print(f"Timeout after {timeout:.0f}s ({steps} candidates tried).")
            return _result(SearchStatus.TIMEOUT)

        frame = stack[-1]
        steps += 1
        if not frame.advance():
            # Every ordering at this level failed: backtrack into the parent
            stack.pop()
            continue

        if not check_for_match(target, stack):
            continue

        if not frame.leftover:
            if check_for_match(target, stack, complete=True):
                permutation = get_taken(stack)
                if not quiet:
                    print(f"Success on level #{len(stack) - 1}: {permutation}")
                return _result(SearchStatus.FOUND, permutation)
            continue

        offset = sum(len(f.pattern) for f in stack)
        stack.append(SearchFrame.create(frame.leftover, chunk_limit, target, offset))
        max_depth = max(max_depth, len(stack) - 1)

    if not quiet:
        print(f"FAILURE, no match for {bits_to_morse(target)}")
    return _result(SearchStatus.EXHAUSTED)


def find_permutation(target: Sequence[bool] | str,
                     chunk_limit: int = DEFAULT_CHUNK_LIMIT,
                     **kwargs) -> str | None:
    """Like :func:`search`, but return just the permutation, or None."""
    return search(target, chunk_limit, **kwargs).permutation


def run(smalpha: str | None = None,
        chunk_limit: int = DEFAULT_CHUNK_LIMIT,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
        max_steps: int | None = None,
        timeout: float | None = None,
        quiet: bool = False) -> list[str]:
    """Validate *smalpha* (or make up a random one) and recover a permutation.

    Returns a one-element list: the permutation found, or ``""`` when the
    search is exhausted or runs out of budget. Raises ValidationError on
    malformed input before any search happens.
    """
    if rng is None:
        rng = random.Random(seed)

    if smalpha is None:
        alphabet, smalpha = random_smalpha(rng)
        if not quiet:
            print(f"Alphabet permutation not given, using a random one: {smalpha} ({alphabet})")

    validate_smalpha(smalpha)
    result = search(smalpha, chunk_limit, rng=rng, max_steps=max_steps,
                    timeout=timeout, quiet=quiet)
    return [result.permutation or ""]
