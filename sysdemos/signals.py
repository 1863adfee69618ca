"""Count interrupt signals and terminate on quit."""

from __future__ import annotations

import argparse
import signal
import sys
from collections.abc import Sequence
from types import FrameType
from typing import Any, TextIO


class SignalCounter:
    """Signal handler that counts SIGINT and exits on any other signal."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.count = 0
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def handle(self, signum: int, frame: FrameType | None) -> None:
        """Count a SIGINT; for anything else report and exit successfully."""
        if signum == signal.SIGINT:
            self.count += 1
            self.stream.write(f"Caught SIGINT count is {self.count}\n")
            self.stream.flush()
            return
        self.stream.write("Caught SIGQUIT terminating.....")
        self.stream.flush()
        raise SystemExit(0)

    def install(self) -> dict[int, Any]:
        """Handle SIGINT and SIGQUIT; return the handlers that were replaced."""
        return {
            signum: signal.signal(signum, self.handle)
            for signum in (signal.SIGINT, signal.SIGQUIT)
        }


def main(argv: Sequence[str] | None = None) -> int:
    """Wait for signals forever, counting interrupts until a quit arrives."""
    parser = argparse.ArgumentParser(description="Signal handling demo.")
    parser.parse_args(argv)
    SignalCounter().install()
    while True:
        signal.pause()


if __name__ == "__main__":
    raise SystemExit(main())