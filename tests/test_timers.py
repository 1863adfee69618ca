import pytest

from sysdemos.timers import (
    RepeatingTimer,
    count_stations,
    parse_leading_int,
    tx_power_level,
)


class FakeRunner:
    def __init__(self, output):
        self.output = output
        self.commands = []

    def __call__(self, command):
        self.commands.append(command)
        return self.output


def test_timer_runs_requested_number_of_times():
    calls = []
    timer = RepeatingTimer(0, lambda t: calls.append(t))
    assert timer.run(3) == 3
    assert calls == [timer, timer, timer]


def test_timer_stops_from_callback():
    calls = []

    def callback(timer):
        calls.append(1)
        if len(calls) == 2:
            timer.stop()

    timer = RepeatingTimer(0, callback)
    assert timer.run() == 2
    assert len(calls) == 2


def test_timer_can_run_again_after_stop():
    calls = []
    timer = RepeatingTimer(0, lambda t: calls.append(1))
    timer.stop()
    assert timer.run(2) == 2
    assert len(calls) == 2


def test_timer_rejects_negative_interval():
    with pytest.raises(ValueError):
        RepeatingTimer(-1, lambda t: None)


def test_timer_rejects_negative_iterations():
    with pytest.raises(ValueError):
        RepeatingTimer(0, lambda t: None).run(-1)


@pytest.mark.parametrize(
    "text, expected",
    [("  42abc", 42), ("-7\n", -7), ("+5", 5), ("abc", 0), ("", 0)],
)
def test_parse_leading_int(text, expected):
    assert parse_leading_int(text) == expected


def test_count_stations_runs_station_dump():
    runner = FakeRunner("3\n")
    assert count_stations("wlan0", runner) == 3
    assert runner.commands == ["iw wlan0 station dump | grep Station -wc"]


def test_tx_power_level_runs_info_command():
    runner = FakeRunner("20\nignored\n")
    assert tx_power_level("wlp3s0", runner) == 20
    assert runner.commands == [
        'iw wlp3s0 info | grep txpower | cut -d " " -f 2 | cut -d "." -f 1'
    ]


def test_reading_uses_only_first_line():
    assert count_stations("wlan0", FakeRunner("5\n9\n")) == 5


def test_empty_output_is_an_error():
    with pytest.raises(ValueError):
        tx_power_level("wlan0", FakeRunner(""))
    with pytest.raises(ValueError):
        count_stations("wlan0", FakeRunner(""))


def test_runner_failure_propagates():
    def failing(command):
        raise OSError("cannot run")

    with pytest.raises(OSError):
        count_stations("wlan0", failing)