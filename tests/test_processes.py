import os
import sys

import pytest

from sysdemos import processes


def test_fork_hello_returns_child_pid():
    pid = processes.fork_hello()
    assert pid > 0
    waited, status = os.waitpid(pid, 0)
    assert waited == pid
    assert os.waitstatus_to_exitcode(status) == 0


def test_fork_and_wait_reports_same_child():
    child, waited = processes.fork_and_wait()
    assert child > 0
    assert child == waited


def test_fork_copy_demo_keeps_parent_values():
    report = processes.fork_copy_demo(0)
    assert report.parent_values == (111, 222)
    assert report.child_values == (333, 666)
    assert report.child_pid != os.getpid()


def test_fork_copy_demo_repeatable():
    first = processes.fork_copy_demo(0)
    second = processes.fork_copy_demo(0)
    assert first.child_values == second.child_values
    assert first.parent_values == second.parent_values


def test_fork_exec_returns_exit_code():
    command = [sys.executable, "-c", "raise SystemExit(3)"]
    assert processes.fork_exec(command) == 3


def test_fork_exec_success():
    assert processes.fork_exec([sys.executable, "-c", "pass"]) == 0


def test_fork_exec_missing_program():
    assert processes.fork_exec(["./no-such-program-here"]) == 127


def test_fork_exec_empty_command():
    with pytest.raises(ValueError):
        processes.fork_exec([])


@pytest.mark.parametrize("chunk_size", [1, 3, 10, 100])
def test_pipe_echo_round_trip(capfd, chunk_size):
    assert processes.pipe_echo("hello pipe", chunk_size) == 0
    assert capfd.readouterr().out == "hello pipe\n"


def test_pipe_echo_empty_message(capfd):
    assert processes.pipe_echo("", 10) == 0
    assert capfd.readouterr().out == "\n"


def test_pipe_echo_rejects_bad_chunk():
    with pytest.raises(ValueError):
        processes.pipe_echo("text", 0)