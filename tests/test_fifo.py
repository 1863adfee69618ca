import pytest

from sysdemos.fifo import Fifo, main


def test_fifo_order():
    values = [10, 20, 30]
    queue = Fifo()
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values


def test_len_tracks_operations():
    queue = Fifo()
    queue.enqueue(1)
    queue.enqueue(2)
    assert len(queue) == 2
    queue.dequeue()
    assert len(queue) == 1


def test_interleaved_operations():
    queue = Fifo()
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.dequeue() == 10
    queue.enqueue(40)
    assert queue.dequeue() == 20
    assert queue.dequeue() == 40


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Fifo().dequeue()


def test_dequeue_after_draining_raises():
    queue = Fifo()
    queue.enqueue(5)
    queue.dequeue()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    enqueued = [line.split()[2] for line in lines if line.startswith("Enqueuing")]
    dequeued = [line.split()[2] for line in lines if line.startswith("Dequeueing")]
    assert enqueued == ["10", "20", "30", "40"]
    assert dequeued == enqueued
    assert lines[-1] == "Queue is empty"