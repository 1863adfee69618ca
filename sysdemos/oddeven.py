"""Two threads taking turns to count, one printing even and one odd numbers."""

from __future__ import annotations

import argparse
import queue
import threading
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_DONE = object()


@dataclass
class _State:
    value: int = 0
    turn: str = "even"
    done: bool = False


def alternate(limit: int = 100, delay: float = 0.0) -> Iterator[str]:
    """Yield the lines two alternating threads print while counting past limit.

    The even thread reports the starting zero, then each thread in turn adds one.
    The even thread stops once the count exceeds limit; the odd thread stops when
    its own increment takes the count past limit.
    """
    cond = threading.Condition()
    state = _State()
    lines: queue.Queue[object] = queue.Queue()
    stop = threading.Event()

    def finish() -> None:
        state.done = True
        cond.notify_all()

    def even() -> None:
        try:
            while True:
                with cond:
                    cond.wait_for(lambda: state.turn == "even" or state.done)
                    if state.done or state.value > limit:
                        finish()
                        return
                    if state.value != 0:
                        state.value += 1
                    lines.put(f"Thread Even {state.value}")
                    state.turn = "odd"
                    cond.notify_all()
                if delay and stop.wait(delay):
                    with cond:
                        finish()
                    return
        finally:
            lines.put(_DONE)

    def odd() -> None:
        try:
            while True:
                with cond:
                    cond.wait_for(lambda: state.turn == "odd" or state.done)
                    if state.done:
                        return
                    state.value += 1
                    if state.value > limit:
                        finish()
                        return
                    lines.put(f"Thread Odd {state.value}")
                    state.turn = "even"
                    cond.notify_all()
        finally:
            lines.put(_DONE)

    workers = [
        threading.Thread(target=even, daemon=True),
        threading.Thread(target=odd, daemon=True),
    ]
    for worker in workers:
        worker.start()

    try:
        finished = 0
        while finished < len(workers):
            item = lines.get()
            if item is _DONE:
                finished += 1
            else:
                yield str(item)
    finally:
        stop.set()
        with cond:
            finish()
        for worker in workers:
            worker.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the alternating count of the two threads."""
    parser = argparse.ArgumentParser(description="Odd/even thread demo.")
    parser.add_argument("--limit", type=int, default=100)
    parser.add_argument("--delay", type=float, default=1.0)
    args = parser.parse_args(argv)
    for line in alternate(args.limit, args.delay):
        print(line, flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())