"""One level of the segmented backtracking search."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from itertools import permutations

from smooshed.codec import Pattern, letter_pattern, letters_to_bits
from smooshed.errors import DecodeError, InternalInvariantViolation


def _matching_orderings(pool: tuple[str, ...], size: int, target: Pattern,
                        offset: int) -> Iterator[tuple[int, ...]]:
    """Index orderings of *size* pool letters, in ``itertools.permutations``
    order, skipping any whose leading letters already disagree with *target*
    read from *offset*.
    """
    chosen: list[int] = []
    used = [False] * len(pool)

    def _extend(at: int) -> Iterator[tuple[int, ...]]:
        if len(chosen) == size:
            yield tuple(chosen)
            return
        for i, letter in enumerate(pool):
            if used[i]:
                continue
            pattern = letter_pattern(letter)
            end = at + len(pattern)
            if end > len(target) or target[at:end] != pattern:
                continue
            used[i] = True
            chosen.append(i)
            yield from _extend(end)
            chosen.pop()
            used[i] = False

    return _extend(offset)


@dataclass
class SearchFrame:
    """Search state for one level: which letters it may place and which
    orderings of them it has not tried yet.

    Orderings of ``chunk_size`` letters from ``pool`` are generated lazily
    and each is handed out once by :meth:`advance`, never revisited.
    When the frame is built with a target, orderings that cannot match it
    at ``offset`` are skipped without being handed out. ``committed``,
    ``pattern`` and ``leftover`` describe the ordering currently on trial.
    """
    pool: tuple[str, ...]
    chunk_size: int
    committed: tuple[str, ...] = ()
    pattern: Pattern = ()
    leftover: tuple[str, ...] = ()
    tried: int = 0
    _candidates: Iterator[tuple[int, ...]] = field(default_factory=lambda: iter(()), repr=False)

    @classmethod
    def create(cls, pool: Sequence[str], chunk_limit: int,
               target: Pattern | None = None, offset: int = 0) -> SearchFrame:
        """Build a frame over *pool* placing at most *chunk_limit* letters."""
        if chunk_limit < 1:
            raise ValueError(f"chunk_limit must be at least 1, got {chunk_limit}")
        pool = tuple(pool)
        chunk_size = min(chunk_limit, len(pool))
        if target is None:
            candidates = permutations(range(len(pool)), chunk_size)
        else:
            candidates = _matching_orderings(pool, chunk_size, tuple(target), offset)
        return cls(pool=pool, chunk_size=chunk_size, _candidates=candidates)

    @property
    def letters(self) -> str:
        return "".join(self.committed)

    def advance(self) -> bool:
        """Move to the next untried ordering. False once there are none left."""
        try:
            indices = next(self._candidates, None)
            if indices is not None:
                take = tuple(self.pool[i] for i in indices)
                pattern = letters_to_bits(take)
        except DecodeError as exc:
            raise InternalInvariantViolation(
                f"Pool {self.pool!r} holds a letter the codec cannot encode"
            ) from exc

        if indices is None:
            self.committed = ()
            self.pattern = ()
            self.leftover = ()
            return False

        taken = set(indices)
        self.tried += 1
        self.committed = take
        self.pattern = pattern
        self.leftover = tuple(ch for i, ch in enumerate(self.pool) if i not in taken)
        return True
