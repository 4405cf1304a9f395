"""Largest total weight of gold ingots that fits into a backpack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

DEFAULT_INPUT = "input_1.txt"


def max_weight(capacity: int, weights: Iterable[int]) -> int:
    """Return the largest sum of a subset of ``weights`` not exceeding ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    mask = (1 << (capacity + 1)) - 1
    reachable = 1  # bit k set: a subset summing to k exists
    for weight in weights:
        if weight < 0:
            raise ValueError(f"weight must not be negative: {weight}")
        reachable |= (reachable << weight) & mask
    return reachable.bit_length() - 1


def read_input(path: str | Path) -> tuple[int, list[int]]:
    """Read ``capacity count`` followed by ``count`` weights from a file."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    if len(tokens) < 2:
        raise ValueError("expected capacity and ingot count")
    capacity, count = int(tokens[0]), int(tokens[1])
    if capacity < 0 or count < 0:
        raise ValueError("capacity and count must not be negative")
    weights = [int(token) for token in tokens[2 : 2 + count]]
    if len(weights) < count:
        raise ValueError(f"expected {count} weights, found {len(weights)}")
    return capacity, weights


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the gold ingot knapsack task.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    try:
        capacity, weights = read_input(args.path)
    except OSError:
        return 1
    best = max_weight(capacity, sorted(weights))
    print(f"Максимально можно унести {best} килограмм!")
    return 0


if __name__ == "__main__":
    sys.exit(main())