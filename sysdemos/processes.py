"""Process demos built on fork, exec, wait and pipes."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import NoReturn

STDOUT_FILENO = 1

# Lives in the data segment; a child's change does not reach the parent.
_data = 111


def _fork() -> int:
    sys.stdout.flush()
    sys.stderr.flush()
    return os.fork()


def _run_child(body: Callable[[], int]) -> NoReturn:
    """Run body in a forked child and leave the process with its exit code."""
    code = 1
    try:
        code = body()
        sys.stdout.flush()
    finally:
        os._exit(code)


def _exit_code(pid: int) -> int:
    _, status = os.waitpid(pid, 0)
    return os.waitstatus_to_exitcode(status)


def fork_hello() -> int:
    """Fork a child that greets and exits; return its pid to the parent without waiting."""
    print(f"Hello world pid:{os.getpid()}")
    pid = _fork()
    if pid == 0:

        def child() -> int:
            print(f"Hello world I am child pid:{os.getpid()} ")
            return 0

        _run_child(child)
    print(f"Hello world I am parent of {pid} pid:{os.getpid()} ")
    return pid


def fork_and_wait() -> tuple[int, int]:
    """Fork a child, wait for it and return (child pid, pid reported by wait)."""
    print(f"Hello world pid:{os.getpid()}")
    pid = _fork()
    if pid == 0:

        def child() -> int:
            print(f"Hello world I am child pid:{os.getpid()} ")
            return 0

        _run_child(child)
    waited, _ = os.wait()
    print(f"Hello world I am parent of {pid} wc:{waited} pid:{os.getpid()} ")
    return pid, waited


@dataclass(frozen=True)
class CopyReport:
    """Values each process saw after the child changed its copies."""

    child_pid: int
    child_values: tuple[int, int]
    parent_values: tuple[int, int]


def _describe(role: str, data: int, stack: int) -> str:
    return f"PID={os.getpid()} {role} iData={data} iStack={stack}"


def fork_copy_demo(delay: float = 3.0) -> CopyReport:
    """Show that a child changes only its own copies of global and local data."""
    global _data
    stack = 222
    read_end, write_end = os.pipe()
    pid = _fork()
    if pid == 0:

        def child() -> int:
            global _data
            os.close(read_end)
            _data *= 3
            child_stack = stack * 3
            print(_describe("child", _data, child_stack))
            with os.fdopen(write_end, "w") as pipe:
                pipe.write(f"{_data} {child_stack}")
            return 0

        _run_child(child)

    os.close(write_end)
    time.sleep(delay)
    print(_describe("Parent", _data, stack))
    with os.fdopen(read_end) as pipe:
        child_data, child_stack = (int(field) for field in pipe.read().split())
    _exit_code(pid)
    return CopyReport(pid, (child_data, child_stack), (_data, stack))


def fork_exec(command: Sequence[str] = ("./hello",)) -> int:
    """Fork a child that replaces itself with command; wait and return its exit code."""
    args = list(command)
    if not args:
        raise ValueError("command must not be empty")
    print(f"Hello PID: {os.getpid()}")
    pid = _fork()
    if pid == 0:

        def child() -> int:
            print(f"Hello I am child PID : {os.getpid()}")
            sys.stdout.flush()
            try:
                os.execvp(args[0], args)
            except OSError:
                print("This line wont be printed")
            return 127

        _run_child(child)
    code = _exit_code(pid)
    print(f"Hello I am Parent PID: {os.getpid()}")
    return code


def pipe_echo(message: str, chunk_size: int = 10) -> int:
    """Send message through a pipe to a child that echoes it to stdout; return its exit code."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be positive")
    read_end, write_end = os.pipe()
    pid = _fork()
    if pid == 0:

        def child() -> int:
            os.close(write_end)
            with os.fdopen(read_end, "rb", buffering=0) as pipe:
                for chunk in iter(partial(pipe.read, chunk_size), b""):
                    os.write(STDOUT_FILENO, chunk)
            os.write(STDOUT_FILENO, b"\n")
            return 0

        _run_child(child)

    os.close(read_end)
    with os.fdopen(write_end, "wb") as pipe:
        pipe.write(message.encode())
    return _exit_code(pid)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the process demos."""
    parser = argparse.ArgumentParser(description="Process demos.")
    demos = parser.add_subparsers(dest="demo", required=True)
    demos.add_parser("fork", help="fork without waiting")
    demos.add_parser("wait", help="fork and wait for the child")
    copy = demos.add_parser("copy", help="child changes its own copy of data")
    copy.add_argument("--delay", type=float, default=3.0)
    execute = demos.add_parser("exec", help="child runs another program")
    execute.add_argument("command", nargs="*", default=["./hello"])
    pipe = demos.add_parser("pipe", help="send text to a child through a pipe")
    pipe.add_argument("message")
    args = parser.parse_args(argv)

    try:
        if args.demo == "fork":
            fork_hello()
        elif args.demo == "wait":
            fork_and_wait()
        elif args.demo == "copy":
            fork_copy_demo(args.delay)
        elif args.demo == "exec":
            fork_exec(args.command)
        else:
            return pipe_echo(args.message)
    except OSError as error:
        print(f"fork() failed: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())