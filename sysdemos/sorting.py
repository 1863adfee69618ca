"""Simple comparison sorts and a helper that formats integer arrays."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence

Sorter = Callable[[Iterable[int]], list[int]]


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, exchanging each element with any smaller one after it."""
    result = list(items)
    for i, _ in enumerate(result):
        for j in range(i + 1, len(result)):
            if result[i] > result[j]:
                result[i], result[j] = result[j], result[i]
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, inserting each value after the larger ones are shifted right."""
    result: list[int] = []
    for value in items:
        position = len(result)
        while position > 0 and result[position - 1] > value:
            position -= 1
        result.insert(position, value)
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, moving the smallest remaining value to the front each pass."""
    result = list(items)
    for i in range(len(result)):
        min_index = min(range(i, len(result)), key=result.__getitem__)
        if min_index != i:
            result[i], result[min_index] = result[min_index], result[i]
    return result


def format_array(items: Iterable[int]) -> str:
    """Format integers the way the demos print them: each followed by a space."""
    return "".join(f"{value} " for value in items)


# Each demo: sorting function, default input, whether the input is printed first.
DEMOS: dict[str, tuple[Sorter, tuple[int, ...], bool]] = {
    "bubble": (bubble_sort, (53, 24, 67, 82, 9, 6, 28, 75, 42), False),
    "insertion": (insertion_sort, (12, 34, 25, 67, 34, 87, 32, 11, 4), True),
    "selection": (selection_sort, (41, 2, 12, 84, 65, 36, 82, 29, 37), True),
}


def _run_demo(name: str, values: Sequence[int] | None) -> None:
    sorter, default, show_before = DEMOS[name]
    data = list(values) if values else list(default)
    if show_before:
        print(format_array(data))
    print(format_array(sorter(data)))


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the given integers (or each demo array) and print the results."""
    parser = argparse.ArgumentParser(description="Run simple sorting demos.")
    parser.add_argument(
        "--algorithm",
        choices=[*DEMOS, "all"],
        default="all",
        help="which sort to run",
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)

    names = list(DEMOS) if args.algorithm == "all" else [args.algorithm]
    for name in names:
        _run_demo(name, args.values)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())