"""A text progress bar and a countdown that redraw in place."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from typing import TextIO

TOP = 100
BODY = "="
HEAD = ">"
SPINNER = "|/-\\"


def render_bar(count: int) -> str:
    """Return the progress line shown when count percent is done."""
    if not 0 <= count <= TOP:
        raise ValueError(f"count must be between 0 and {TOP}")
    bar = BODY * count + (HEAD if 0 < count < TOP else "")
    return f"[{bar:<{TOP}}][{count}%][{SPINNER[count % len(SPINNER)]}]"


def progress_bar(delay: float = 0.5, stream: TextIO | None = None) -> None:
    """Draw the bar from 0 to 100 percent, pausing delay seconds after each step."""
    out = stream if stream is not None else sys.stdout
    for count in range(TOP + 1):
        out.write(render_bar(count) + "\r")
        out.flush()
        time.sleep(delay)
    out.write("\n")


def countdown(start: int = 100, delay: float = 1.0, stream: TextIO | None = None) -> None:
    """Count down from start to 0 on one line, pausing delay seconds after each number."""
    out = stream if stream is not None else sys.stdout
    for count in range(start, -1, -1):
        out.write(f"{count:<3d}\r")
        out.flush()
        time.sleep(delay)
    out.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Show the progress bar or the countdown."""
    parser = argparse.ArgumentParser(description="In-place screen update demos.")
    demos = parser.add_subparsers(dest="demo", required=True)
    bar = demos.add_parser("bar", help="draw a progress bar")
    bar.add_argument("--delay", type=float, default=0.5)
    down = demos.add_parser("countdown", help="count down on one line")
    down.add_argument("--start", type=int, default=100)
    down.add_argument("--delay", type=float, default=1.0)
    args = parser.parse_args(argv)

    if args.demo == "bar":
        progress_bar(args.delay)
    else:
        countdown(args.start, args.delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())