"""Terminal rendering of a recovered permutation."""

from __future__ import annotations

from smooshed.codec import encode
from smooshed.solver import SearchResult


def render_permutation(permutation: str) -> str:
    """Render each letter above its Morse code, wrapped at 13 letters per row."""
    if not permutation:
        return "(no permutation)"

    lines: list[str] = []
    for start in range(0, len(permutation), 13):
        chunk = permutation[start:start + 13]
        lines.append("".join(f"{ch:>6s}" for ch in chunk))
        lines.append("".join(f"{encode(ch):>6s}" for ch in chunk))
    return "\n".join(lines)


def print_permutation(permutation: str) -> None:
    print("\n" + render_permutation(permutation))


def print_result(result: SearchResult, smalpha: str, original: str | None = None) -> None:
    """Print the search outcome, the permutation found and whether it re-encodes."""
    if result.permutation is None:
        print(f"\nNo permutation found ({result.status.value}) after "
              f"{result.steps} candidates, {result.elapsed:.2f}s.")
        return

    print_permutation(result.permutation)
    print(f"\nPermutation: {result.permutation}")
    if original is not None and original != result.permutation:
        print(f"  (differs from the generated {original}, same encoding)")
    verified = encode(result.permutation) == smalpha
    print(f"  Re-encodes to input: {'yes' if verified else 'NO'}")
    print(f"  {result.steps} candidates tried, deepest level #{result.max_depth}, "
          f"{result.elapsed:.2f}s")
