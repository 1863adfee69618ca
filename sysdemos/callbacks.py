"""Functions stored in data and passed around as values."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


@dataclass
class Pair:
    """Two numbers together with the function that combines them."""

    num1: int
    num2: int
    combine: Callable[[int, int], int] = add

    def combined(self) -> int:
        """Apply the stored function to both numbers."""
        return self.combine(self.num1, self.num2)


def main(argv: Sequence[str] | None = None) -> int:
    """Call functions through a data field and through plain variables."""
    parser = argparse.ArgumentParser(description="Callback demo.")
    parser.parse_args(argv)

    pair = Pair(20, 30)
    print(f"Adding integers {pair.combined()}")

    say: Callable[[str], None] = print
    operation: Callable[[int, int], int] = add
    result = operation(10, 20)
    say("Hello calling through function pointer")
    print(f"Result is {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())