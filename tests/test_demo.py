import time

import pytest

from lobook.demo import BenchmarkResult, main, run_benchmark, timestamp_ns


def test_timestamp_ns_lies_between_clock_readings():
    before = time.time_ns()
    stamp = timestamp_ns()
    after = time.time_ns()
    assert before <= stamp <= after


def test_run_benchmark_counts():
    result = run_benchmark(200, 5)
    assert isinstance(result, BenchmarkResult)
    assert result.num_orders == 200
    assert result.cancels == 100
    assert result.snapshots == 5
    assert result.remaining == 200 - result.cancels


def test_run_benchmark_cancels_every_buy():
    # Even ids are buys and every even id is cancelled.
    result = run_benchmark(200, 3)
    assert result.bids == []
    assert len(result.asks) == 10


def test_run_benchmark_asks_sorted_best_first():
    result = run_benchmark(400, 1)
    prices = [level.price for level in result.asks]
    assert prices == sorted(prices)
    assert len(set(prices)) == len(prices)
    quantities = {level.total_quantity for level in result.asks}
    assert len(quantities) == 1


def test_run_benchmark_timings_not_negative():
    result = run_benchmark(50, 10)
    assert min(result.add_us, result.cancel_us, result.snapshot_us) >= 0


def test_run_benchmark_empty():
    result = run_benchmark(0, 0)
    assert result.remaining == 0
    assert result.bids == [] and result.asks == []


@pytest.mark.parametrize("orders, snapshots", [(-1, 0), (0, -1)])
def test_run_benchmark_rejects_negative(orders, snapshots):
    with pytest.raises(ValueError):
        run_benchmark(orders, snapshots)


def test_main_succeeds(capsys):
    assert main(["--orders", "100", "--snapshots", "10"]) == 0
    out = capsys.readouterr().out
    assert "All tests passed successfully!" in out
    assert "Added 100 orders in" in out
    assert "Canceled 50 orders in" in out
    assert "10 snapshots in" in out


def test_main_rejects_negative_orders():
    with pytest.raises(SystemExit) as excinfo:
        main(["--orders", "-5"])
    assert excinfo.value.code == 2