"""A first-in, first-out queue of integers."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Sequence


class Fifo:
    """FIFO queue of integers."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Add a value at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value; IndexError if the queue is empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


def main(argv: Sequence[str] | None = None) -> int:
    """Enqueue and dequeue a few values, printing each operation."""
    parser = argparse.ArgumentParser(description="Queue demo.")
    parser.parse_args(argv)

    queue = Fifo()

    def enqueue(value: int) -> None:
        print(f"Enqueuing data {value} to queue")
        queue.enqueue(value)

    def dequeue() -> None:
        try:
            value = queue.dequeue()
        except IndexError:
            print("Queue is empty")
        else:
            print(f"Dequeueing data {value} out of queue")

    for value in (10, 20, 30):
        enqueue(value)
    dequeue()
    enqueue(40)
    for _ in range(4):
        dequeue()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())