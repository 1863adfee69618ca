"""Small thread demos: named workers, racy and locked counters, thread results."""

from __future__ import annotations

import argparse
import string
import sys
import threading
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO


class _Counter:
    """Shared mutable integer handed to every worker."""

    def __init__(self) -> None:
        self.value = 0


def _label(index: int) -> str:
    if index < len(string.ascii_uppercase):
        return string.ascii_uppercase[index]
    return f"T{index}"


def run_named_threads(names: Iterable[str], stream: TextIO) -> None:
    """Start one thread per name; each writes its name on a line of its own to stream."""
    write_lock = threading.Lock()

    def worker(name: str) -> None:
        with write_lock:
            stream.write(f"{name}\n")

    threads = [threading.Thread(target=worker, args=(name,)) for name in names]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def _run_workers(
    loops: int,
    workers: int,
    lock: threading.Lock | None,
    stream: TextIO | None = None,
) -> int:
    if loops < 0:
        raise ValueError("loops must not be negative")
    if workers < 1:
        raise ValueError("at least one worker is needed")

    counter = _Counter()
    write_lock = threading.Lock()

    def report(text: str) -> None:
        if stream is not None:
            with write_lock:
                stream.write(f"{text}\n")

    def worker(label: str) -> None:
        report(f"{label}: begin")
        if lock is None:
            for _ in range(loops):
                counter.value = counter.value + 1
        else:
            for _ in range(loops):
                with lock:
                    local = counter.value
                    local += 1
                    counter.value = local
        report(f"{label}: end")

    threads = [
        threading.Thread(target=worker, args=(_label(index),))
        for index in range(workers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter.value


def count_unlocked(loops: int, workers: int = 2) -> int:
    """Let workers increment a shared counter with no lock; updates may be lost."""
    return _run_workers(loops, workers, None)


def count_with_lock(loops: int, workers: int = 2) -> int:
    """Let workers increment a shared counter under a mutex; no update is lost."""
    return _run_workers(loops, workers, threading.Lock())


def message_length(message: str, stream: TextIO) -> int:
    """Print message to stream from another thread and return the length it reports."""

    def worker() -> int:
        stream.write(f"{message}\n")
        return len(message)

    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(worker).result()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the thread demos."""
    parser = argparse.ArgumentParser(description="Thread demos.")
    demos = parser.add_subparsers(dest="demo", required=True)
    demos.add_parser("names", help="two threads print their names")
    shared = demos.add_parser("shared", help="two threads race on a counter")
    shared.add_argument("--loops", type=int, default=10_000_000)
    mutex = demos.add_parser("mutex", help="two threads count under a lock")
    mutex.add_argument("loops", type=int)
    demos.add_parser("sample", help="a thread returns a value")
    args = parser.parse_args(argv)

    if args.demo == "names":
        print("main begin:")
        run_named_threads(["A", "B"], sys.stdout)
        print(":main end")
    elif args.demo == "shared":
        print("main begin counter:0")
        total = _run_workers(args.loops, 2, None, sys.stdout)
        print(f":main done with both counter: {total} ")
    elif args.demo == "mutex":
        print(f"Num of Loops {args.loops}")
        print(f"glob = {count_with_lock(args.loops, 2)}")
    else:
        print("Message from Main thread")
        length = message_length("Hello World\n", sys.stdout)
        print(f"Thread returned {length}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())