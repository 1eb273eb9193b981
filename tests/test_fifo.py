import threading
import time

import pytest

from lobook.fifo import Fifo, FifoEmpty, SpscFifo


def test_fifo_order():
    for fifo in (Fifo(4), SpscFifo(4)):
        for value in ["a", "b", "c"]:
            assert fifo.push(value)
        assert [fifo.pop(), fifo.pop(), fifo.pop()] == ["a", "b", "c"]
        assert fifo.empty()


def test_push_fails_when_full():
    for fifo in (Fifo(3), SpscFifo(3)):
        assert all(fifo.push(i) for i in range(3))
        assert fifo.full()
        assert fifo.push(99) is False
        assert len(fifo) == 3
        assert fifo.pop() == 0


def test_pop_empty_raises():
    for fifo in (Fifo(2), SpscFifo(2)):
        with pytest.raises(FifoEmpty):
            fifo.pop()
        fifo.push(1)
        assert fifo.pop() == 1
        with pytest.raises(FifoEmpty):
            fifo.pop()


def test_wraparound_preserves_order():
    for fifo in (Fifo(3), SpscFifo(3)):
        popped = []
        for value in range(20):
            assert fifo.push(value)
            if len(fifo) == 2:
                popped.append(fifo.pop())
        while not fifo.empty():
            popped.append(fifo.pop())
        assert popped == list(range(20))


def test_len_and_capacity():
    for fifo in (Fifo(5), SpscFifo(5)):
        assert fifo.capacity == 5
        assert len(fifo) == 0
        fifo.push("x")
        fifo.push("y")
        assert len(fifo) == 2
        assert not fifo.empty()
        assert not fifo.full()


def test_zero_capacity():
    for fifo in (Fifo(0), SpscFifo(0)):
        assert fifo.full()
        assert fifo.empty()
        assert fifo.push(1) is False
        with pytest.raises(FifoEmpty):
            fifo.pop()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Fifo(-1)
    with pytest.raises(ValueError):
        SpscFifo(-1)


def test_spsc_threads_deliver_everything_in_order():
    fifo = SpscFifo(8)
    count = 2000
    received = []

    def produce():
        for value in range(count):
            while not fifo.push(value):
                time.sleep(0)

    def consume():
        while len(received) < count:
            try:
                received.append(fifo.pop())
            except FifoEmpty:
                time.sleep(0)

    producer = threading.Thread(target=produce)
    consumer = threading.Thread(target=consume)
    producer.start()
    consumer.start()
    producer.join(timeout=30)
    consumer.join(timeout=30)
    assert not producer.is_alive()
    assert not consumer.is_alive()
    assert received == list(range(count))
    assert fifo.empty()