"""A singly linked list that grows at the tail and shrinks from the tail."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list of integers."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def append(self, value: int) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def delete_last(self) -> int:
        """Remove the last node and return its value; IndexError if the list is empty."""
        if self._head is None:
            raise IndexError("no node to delete")
        if self._head.next is None:
            value = self._head.value
            self._head = None
        else:
            before_last = self._head
            while before_last.next.next is not None:
                before_last = before_last.next
            value = before_last.next.value
            before_last.next = None
        self._size -= 1
        return value

    def describe(self) -> str:
        """Describe the list contents, one line per node."""
        if self._head is None:
            return "Linked list is empty"
        return "\n".join(f"Value in the node is {value}" for value in self)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


def main(argv: Sequence[str] | None = None) -> int:
    """Build a three-node list, print it, delete every node and print it again."""
    parser = argparse.ArgumentParser(description="Linked list demo.")
    parser.parse_args(argv)

    items = LinkedList()
    for value in (10, 20, 30):
        items.append(value)
    print(items.describe())

    for _ in range(3):
        try:
            items.delete_last()
        except IndexError:
            print("No node to delete")
        else:
            print("Deleting last node")

    print(items.describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())