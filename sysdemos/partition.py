"""Order-preserving partition of integers around a pivot value."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

DEMO_VALUES = (3, 1, 9, 7, 3, 4, 2, 5, 8, 1)
DEMO_PIVOT = 4


def stable_partition(values: Iterable[int], pivot: int) -> list[int]:
    """Return values below pivot, then equal to it, then above it, each group in original order."""
    data = list(values)
    below = [value for value in data if value < pivot]
    equal = [value for value in data if value == pivot]
    above = [value for value in data if value > pivot]
    return below + equal + above


def main(argv: Sequence[str] | None = None) -> int:
    """Partition the demo array around its pivot and print one value per line."""
    parser = argparse.ArgumentParser(description="Partition an array around a pivot.")
    parser.parse_args(argv)
    for value in stable_partition(DEMO_VALUES, DEMO_PIVOT):
        print(value)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())