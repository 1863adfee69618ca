"""A last-in, first-out stack of integers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


class Stack:
    """LIFO stack of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put a value on top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


def main(argv: Sequence[str] | None = None) -> int:
    """Push and pop a few values, printing each operation."""
    parser = argparse.ArgumentParser(description="Stack demo.")
    parser.parse_args(argv)

    stack = Stack()

    def push(value: int) -> None:
        print(f"Pushing data {value} to stack")
        stack.push(value)

    def pop() -> None:
        try:
            value = stack.pop()
        except IndexError:
            print("Stack is empty")
        else:
            print(f"Popping data {value} out of stack")

    for value in (10, 20, 30):
        push(value)
    pop()
    push(40)
    pop()
    pop()
    pop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())