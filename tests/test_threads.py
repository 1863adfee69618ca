import io

import pytest

from sysdemos import threads


def test_named_threads_each_write_their_name():
    stream = io.StringIO()
    threads.run_named_threads(["A", "B"], stream)
    assert sorted(stream.getvalue().splitlines()) == ["A", "B"]


def test_named_threads_with_no_names_write_nothing():
    stream = io.StringIO()
    threads.run_named_threads([], stream)
    assert stream.getvalue() == ""


def test_locked_count_loses_nothing():
    loops, workers = 5000, 4
    assert threads.count_with_lock(loops, workers) == loops * workers


def test_unlocked_count_never_exceeds_total():
    loops, workers = 5000, 2
    result = threads.count_unlocked(loops, workers)
    assert 0 < result <= loops * workers


def test_zero_loops_count_zero():
    assert threads.count_with_lock(0, 3) == 0
    assert threads.count_unlocked(0, 3) == 0


@pytest.mark.parametrize("loops, workers", [(-1, 2), (10, 0)])
def test_invalid_arguments_raise(loops, workers):
    with pytest.raises(ValueError):
        threads.count_with_lock(loops, workers)
    with pytest.raises(ValueError):
        threads.count_unlocked(loops, workers)


def test_message_length_returns_length_and_prints():
    stream = io.StringIO()
    message = "Hello World\n"
    assert threads.message_length(message, stream) == len(message)
    assert stream.getvalue() == "Hello World\n\n"


def test_main_mutex_prints_total(capsys):
    assert threads.main(["mutex", "1000"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Num of Loops 1000", "glob = 2000"]


def test_main_names_frames_thread_output(capsys):
    assert threads.main(["names"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "main begin:"
    assert out[-1] == ":main end"
    assert sorted(out[1:-1]) == ["A", "B"]


def test_main_shared_reports_begin_and_end(capsys):
    assert threads.main(["shared", "--loops", "100"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "main begin counter:0"
    assert sorted(out[1:-1]) == ["A: begin", "A: end", "B: begin", "B: end"]
    assert out[-1].startswith(":main done with both counter: ")