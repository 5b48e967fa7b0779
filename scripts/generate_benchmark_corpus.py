"""Utility script to synthesize a large text file for search benchmarks."""

from __future__ import annotations

import argparse
import random
import string
from pathlib import Path

DEFAULT_NEEDLE = "needle"
WORDS_PER_LINE = 12


def make_random_word(rng: random.Random) -> str:
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 9)))


def needle_variant(needle: str, idx: int) -> str:
    return (needle, needle.upper(), needle.title())[idx % 3]


def generate_corpus(path: Path, line_count: int, needle: str = DEFAULT_NEEDLE, every: int = 100) -> int:
    """Write ``line_count`` lines to ``path`` and return how many got the needle planted."""
    path.parent.mkdir(parents=True, exist_ok=True)
    rng = random.Random(line_count)
    hits = 0
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        for idx in range(line_count):
            words = [make_random_word(rng) for _ in range(WORDS_PER_LINE)]
            if every > 0 and idx % every == 0:
                words.insert(rng.randrange(len(words)), needle_variant(needle, hits))
                hits += 1
            handle.write(" ".join(words) + "\n")
    return hits


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("output", type=str, help="Destination file")
    parser.add_argument("--lines", type=int, default=200_000, help="How many lines to generate")
    parser.add_argument("--needle", type=str, default=DEFAULT_NEEDLE, help="Word planted in the corpus")
    parser.add_argument("--every", type=int, default=100, help="Plant the needle on every Nth line")
    args = parser.parse_args()

    generate_corpus(Path(args.output), args.lines, args.needle, args.every)


if __name__ == "__main__":
    main()
