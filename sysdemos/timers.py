"""Repeating timers and periodic wireless access point reports."""

from __future__ import annotations

import argparse
import re
import subprocess
import threading
from collections.abc import Callable, Sequence

Runner = Callable[[str], str]

STATIONS_COMMAND = "iw {ifname} station dump | grep Station -wc"
TX_POWER_COMMAND = 'iw {ifname} info | grep txpower | cut -d " " -f 2 | cut -d "." -f 1'

# Only this many characters of the command's first line are read.
_READ_LIMIT = 15

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class RepeatingTimer:
    """Call a function every interval seconds until stopped or a number of calls is reached."""

    def __init__(self, interval: float, callback: Callable[[RepeatingTimer], None]) -> None:
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.interval = interval
        self.callback = callback
        self._stopped = threading.Event()

    def run(self, iterations: int | None = None) -> int:
        """Wait an interval, then call the callback; repeat. Return the number of calls made."""
        if iterations is not None and iterations < 0:
            raise ValueError("iterations must not be negative")
        self._stopped.clear()
        calls = 0
        while iterations is None or calls < iterations:
            if self._stopped.wait(self.interval):
                break
            self.callback(self)
            calls += 1
            if self._stopped.is_set():
                break
        return calls

    def stop(self) -> None:
        """Stop the timer; a running loop returns before its next call."""
        self._stopped.set()


def parse_leading_int(text: str) -> int:
    """Read an optionally signed integer at the start of text, after blanks; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _shell(command: str) -> str:
    return subprocess.run(
        command, shell=True, capture_output=True, text=True, check=False
    ).stdout


def _first_reading(command: str, runner: Runner | None) -> int:
    output = (runner or _shell)(command)
    if not output:
        raise ValueError(f"no output from command {command!r}")
    first_line = output.splitlines(keepends=True)[0]
    return parse_leading_int(first_line[:_READ_LIMIT])


def count_stations(ifname: str, runner: Runner | None = None) -> int:
    """Return the number of stations connected to the access point interface."""
    return _first_reading(STATIONS_COMMAND.format(ifname=ifname), runner)


def tx_power_level(ifname: str, runner: Runner | None = None) -> int:
    """Return the transmit power of the interface in dBm."""
    return _first_reading(TX_POWER_COMMAND.format(ifname=ifname), runner)


def _station_report(ifname: str) -> str:
    try:
        stations = count_stations(ifname)
    except (OSError, ValueError) as error:
        return f"Error in reading number of stations {error}"
    return f"Number of clients connected={stations}"


def _reporter(produce: Callable[[], str]) -> Callable[[RepeatingTimer], None]:
    """Build a timer callback that prints what produce returns on every tick."""

    def report(_: RepeatingTimer) -> None:
        print(produce(), flush=True)

    return report


def main(argv: Sequence[str] | None = None) -> int:
    """Run the plain repeating timer or the periodic access point report."""
    parser = argparse.ArgumentParser(description="Timer demos.")
    demos = parser.add_subparsers(dest="demo", required=True)
    plain = demos.add_parser("timer", help="print a line on every tick")
    plain.add_argument("--interval", type=float, default=10.0)
    report = demos.add_parser("report", help="report connected stations periodically")
    report.add_argument("--interval", type=float, default=5.0)
    report.add_argument("--ap-ifname", default="Span_AP")
    report.add_argument("--tx-ifname", default="wlp3s0")
    args = parser.parse_args(argv)

    if args.demo == "timer":
        RepeatingTimer(args.interval, _reporter(lambda: "Inside timer")).run()
        return 0

    try:
        power = tx_power_level(args.tx_ifname)
    except OSError as error:
        print(f"Error executing command {error}")
        power = -1
    except ValueError as error:
        print(f"Error in reading power level {error}")
        power = 0
    print(f"Current power_level of AP {power}dBm", flush=True)

    ap_ifname = args.ap_ifname
    RepeatingTimer(args.interval, _reporter(lambda: _station_report(ap_ifname))).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())