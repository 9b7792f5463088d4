"""CLI entry point for the smooshed Morse alphabet solver."""

from __future__ import annotations

import argparse
import math
import random
import sys

from smooshed.alphabet import random_smalpha
from smooshed.codec import encode
from smooshed.constants import DEFAULT_CHUNK_LIMIT, DEFAULT_TIMEOUT
from smooshed.display import print_result
from smooshed.errors import DecodeError, ValidationError
from smooshed.solver import search, validate_smalpha


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Smooshed Morse solver — recover an alphabet permutation from its encoding",
    )
    parser.add_argument(
        "smalpha",
        nargs="?",
        help="Smooshed Morse of a permutation of a-z (82 dots/dashes). "
             "A random one is generated when omitted.",
    )
    parser.add_argument(
        "--chunk", "-c",
        type=int,
        default=DEFAULT_CHUNK_LIMIT,
        help=f"Letters committed per search level (default: {DEFAULT_CHUNK_LIMIT})",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Search timeout in seconds (default: {DEFAULT_TIMEOUT:.0f})",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Give up after trying this many candidates",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for the random puzzle and search order",
    )
    parser.add_argument(
        "--encode", "-e",
        nargs="+",
        metavar="WORD",
        help="Print the smooshed Morse of each word and exit",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the result",
    )
    args = parser.parse_args(argv)
    if args.chunk < 1:
        parser.error("--chunk must be at least 1")
    if not math.isfinite(args.timeout) or args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds")
    if args.max_steps is not None and args.max_steps < 1:
        parser.error("--max-steps must be at least 1")
    return args


def encode_and_print(words: list[str]) -> None:
    for word in words:
        try:
            print(f"{word}: {encode(word)}")
        except DecodeError as e:
            print(f"Cannot encode {word!r}: {e}")
            sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    if args.encode:
        encode_and_print(args.encode)
        return

    rng = random.Random(args.seed)

    # 1. Get the puzzle
    original: str | None = None
    smalpha = args.smalpha
    if smalpha is None:
        original, smalpha = random_smalpha(rng)
        print(f"No input given, using random permutation {original}")

    # 2. Validate
    try:
        validate_smalpha(smalpha)
    except ValidationError as e:
        print(f"Invalid input ({e.kind.value}): {e}")
        sys.exit(1)

    # 3. Solve
    print(f"\nSolving {smalpha} (chunk: {args.chunk}, timeout: {args.timeout:.0f}s)...")
    result = search(
        smalpha, args.chunk, rng=rng, max_steps=args.max_steps,
        timeout=args.timeout, quiet=args.quiet,
    )

    # 4. Display
    print_result(result, smalpha, original)
    if not result.found:
        sys.exit(1)


if __name__ == "__main__":
    main()
