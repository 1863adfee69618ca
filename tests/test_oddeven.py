from itertools import islice

from sysdemos.oddeven import alternate, main


def _numbers(lines):
    return [int(line.rsplit(" ", 1)[1]) for line in lines]


def test_small_limit_sequence():
    assert list(alternate(4, 0)) == [
        "Thread Even 0",
        "Thread Odd 1",
        "Thread Even 2",
        "Thread Odd 3",
        "Thread Even 4",
    ]


def test_default_limit_ends_with_even_hundred():
    lines = list(alternate(100, 0))
    assert lines[0] == "Thread Even 0"
    assert lines[-1] == "Thread Even 100"
    assert _numbers(lines) == list(range(len(lines)))


def test_threads_take_turns():
    lines = list(alternate(30, 0))
    for position, line in enumerate(lines):
        expected = "Thread Even" if position % 2 == 0 else "Thread Odd"
        assert line.startswith(expected)


def test_counts_are_never_far_past_limit():
    for limit in range(0, 8):
        numbers = _numbers(alternate(limit, 0))
        assert numbers[0] == 0
        assert limit <= numbers[-1] <= limit + 1


def test_negative_limit_prints_nothing():
    assert list(alternate(-1, 0)) == []


def test_closing_early_stops_threads():
    gen = alternate(1000, 0)
    first = list(islice(gen, 2))
    gen.close()
    assert first == ["Thread Even 0", "Thread Odd 1"]


def test_main_prints_lines(capsys):
    assert main(["--limit", "2", "--delay", "0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Thread Even 0", "Thread Odd 1", "Thread Even 2"]