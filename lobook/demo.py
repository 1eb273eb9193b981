"""Demonstration scenarios and a small throughput benchmark for the order book."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field

from lobook.order_book import Order, OrderBook, PriceLevel

__all__ = ["BenchmarkResult", "timestamp_ns", "run_benchmark", "main"]

_RULE = "========================================"
_SNAPSHOT_DEPTH = 10


def timestamp_ns() -> int:
    """Return the current wall-clock time in nanoseconds."""
    return time.time_ns()


@dataclass(frozen=True)
class BenchmarkResult:
    """Timings of one benchmark run, in whole microseconds."""

    num_orders: int
    add_us: int
    cancels: int
    cancel_us: int
    snapshots: int
    snapshot_us: int
    remaining: int
    bids: list[PriceLevel] = field(default_factory=list)
    asks: list[PriceLevel] = field(default_factory=list)


def _elapsed_us(start_ns: int) -> int:
    return (time.perf_counter_ns() - start_ns) // 1000


def run_benchmark(num_orders: int = 10000, snapshots: int = 1000) -> BenchmarkResult:
    """Add orders, cancel every even id, then take repeated depth snapshots."""
    if num_orders < 0:
        raise ValueError(f"num_orders must not be negative: {num_orders}")
    if snapshots < 0:
        raise ValueError(f"snapshots must not be negative: {snapshots}")

    book = OrderBook()

    start = time.perf_counter_ns()
    for i in range(num_orders):
        book.add_order(
            Order(i, i % 2 == 0, 100.0 + (i % 100) * 0.01, 100, timestamp_ns())
        )
    add_us = _elapsed_us(start)

    cancels = num_orders // 2
    start = time.perf_counter_ns()
    for i in range(cancels):
        book.cancel_order(i * 2)
    cancel_us = _elapsed_us(start)

    start = time.perf_counter_ns()
    for _ in range(snapshots):
        book.snapshot(_SNAPSHOT_DEPTH)
    snapshot_us = _elapsed_us(start)

    bids, asks = book.snapshot(_SNAPSHOT_DEPTH)
    return BenchmarkResult(
        num_orders=num_orders,
        add_us=add_us,
        cancels=cancels,
        cancel_us=cancel_us,
        snapshots=snapshots,
        snapshot_us=snapshot_us,
        remaining=len(book),
        bids=bids,
        asks=asks,
    )


def _average(total_us: int, count: int) -> float:
    return total_us / count if count else 0.0


def _report(result: BenchmarkResult) -> str:
    return "\n".join(
        [
            f"Added {result.num_orders} orders in {result.add_us} µs",
            f"Average: {_average(result.add_us, result.num_orders):.3f} µs per order",
            f"Canceled {result.cancels} orders in {result.cancel_us} µs",
            f"Average: {_average(result.cancel_us, result.cancels):.3f} µs per cancel",
            f"{result.snapshots} snapshots in {result.snapshot_us} µs",
            f"Average: {_average(result.snapshot_us, result.snapshots):.3f} µs per snapshot",
        ]
    )


def _expect(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def _add_orders() -> None:
    print("\n=== Test: Add Orders ===")
    book = OrderBook()
    for order_id, is_buy, price, quantity in [
        (1, True, 100.0, 50),
        (2, True, 100.0, 30),
        (3, True, 99.0, 100),
        (4, False, 101.0, 40),
        (5, False, 102.0, 60),
        (6, False, 101.0, 20),
    ]:
        book.add_order(Order(order_id, is_buy, price, quantity, timestamp_ns()))
    book.print_book()

    bids, asks = book.snapshot(5)
    _expect(
        bids == [PriceLevel(100.0, 80), PriceLevel(99.0, 100)],
        f"unexpected bids {bids}",
    )
    _expect(
        asks == [PriceLevel(101.0, 60), PriceLevel(102.0, 60)],
        f"unexpected asks {asks}",
    )
    print("✓ Add orders test passed")


def _cancel_order() -> None:
    print("\n=== Test: Cancel Order ===")
    book = OrderBook()
    book.add_order(Order(1, True, 100.0, 50, timestamp_ns()))
    book.add_order(Order(2, True, 100.0, 30, timestamp_ns()))
    book.add_order(Order(3, True, 99.0, 100, timestamp_ns()))

    print("Before cancel:")
    book.print_book()
    _expect(book.cancel_order(2), "cancel of order 2 failed")
    print("After canceling order 2:")
    book.print_book()

    bids, _ = book.snapshot(5)
    _expect(bids[0] == PriceLevel(100.0, 50), f"unexpected best bid {bids[0]}")
    _expect(not book.cancel_order(999), "cancel of unknown order succeeded")
    print("✓ Cancel order test passed")


def _amend_order() -> None:
    print("\n=== Test: Amend Order ===")
    book = OrderBook()
    book.add_order(Order(1, True, 100.0, 50, timestamp_ns()))
    book.add_order(Order(2, False, 101.0, 40, timestamp_ns()))

    print("Before amend:")
    book.print_book()

    _expect(book.amend_order(1, 100.0, 75), "quantity amend failed")
    print("After amending quantity (order 1, 50->75):")
    book.print_book()
    bids, _ = book.snapshot(5)
    _expect(bids[0].total_quantity == 75, f"unexpected best bid {bids[0]}")

    _expect(book.amend_order(1, 99.5, 75), "price amend failed")
    print("After amending price (order 1, 100.0->99.5):")
    book.print_book()
    bids, _ = book.snapshot(5)
    _expect(bids[0] == PriceLevel(99.5, 75), f"unexpected best bid {bids[0]}")

    _expect(not book.amend_order(999, 100.0, 10), "amend of unknown order succeeded")
    print("✓ Amend order test passed")


def _snapshot_depth() -> None:
    print("\n=== Test: Snapshot Depth ===")
    book = OrderBook()
    for i in range(10):
        book.add_order(Order(i, True, 100.0 - i, 100, timestamp_ns()))
        book.add_order(Order(100 + i, False, 101.0 + i, 100, timestamp_ns()))

    bids, asks = book.snapshot(3)
    _expect(len(bids) == 3 and len(asks) == 3, "depth 3 snapshot has wrong size")
    _expect(bids[0].price == 100.0, f"unexpected best bid {bids[0]}")
    _expect(asks[0].price == 101.0, f"unexpected best ask {asks[0]}")

    bids, asks = book.snapshot(15)
    _expect(len(bids) == 10 and len(asks) == 10, "deep snapshot has wrong size")

    print("Top 5 levels:")
    book.print_book(5)
    print("✓ Snapshot depth test passed")


def _fifo_priority() -> None:
    print("\n=== Test: FIFO Priority ===")
    book = OrderBook()
    book.add_order(Order(1, True, 100.0, 50, timestamp_ns()))
    book.add_order(Order(2, True, 100.0, 30, timestamp_ns()))
    book.add_order(Order(3, True, 100.0, 20, timestamp_ns()))

    bids, _ = book.snapshot(5)
    _expect(bids[0].total_quantity == 100, f"unexpected best bid {bids[0]}")
    book.cancel_order(1)
    bids, _ = book.snapshot(5)
    _expect(bids[0].total_quantity == 50, f"unexpected best bid {bids[0]}")
    book.cancel_order(2)
    bids, _ = book.snapshot(5)
    _expect(bids[0].total_quantity == 20, f"unexpected best bid {bids[0]}")
    print("✓ FIFO priority test passed")


def _performance(num_orders: int, snapshots: int) -> None:
    print("\n=== Test: Performance ===")
    print(_report(run_benchmark(num_orders, snapshots)))
    print("✓ Performance test completed")


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Run every scenario and the benchmark; return 0 on success, 1 on failure."""
    parser = argparse.ArgumentParser(
        prog="lobook", description="Exercise the limit order book."
    )
    parser.add_argument("--orders", type=_non_negative, default=10000,
                        help="orders added in the benchmark")
    parser.add_argument("--snapshots", type=_non_negative, default=1000,
                        help="snapshots taken in the benchmark")
    args = parser.parse_args(argv)

    print(_RULE)
    print("  Low-Latency Limit Order Book Tests")
    print(_RULE)
    try:
        _add_orders()
        _cancel_order()
        _amend_order()
        _snapshot_depth()
        _fifo_priority()
        _performance(args.orders, args.snapshots)
    except Exception as exc:  # report any failure and signal it by exit status
        print(f"\n✗ Test failed with exception: {exc}", file=sys.stderr)
        return 1

    print(f"\n{_RULE}")
    print("  ✓ All tests passed successfully!")
    print(f"{_RULE}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())