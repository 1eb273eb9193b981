"""Limit order book with price-time priority and aggregated depth snapshots."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field, replace
from itertools import count, islice

from sortedcontainers import SortedDict

__all__ = ["Order", "PriceLevel", "OrderBook"]


@dataclass
class Order:
    """A resting limit order."""

    order_id: int
    is_buy: bool
    price: float
    quantity: int
    timestamp_ns: int = 0


@dataclass(frozen=True)
class PriceLevel:
    """Aggregated volume resting at one price."""

    price: float
    total_quantity: int


@dataclass
class _Level:
    # Keys are insertion slots, so iteration order is arrival (FIFO) order.
    orders: dict[int, Order] = field(default_factory=dict)
    total_quantity: int = 0


@dataclass(frozen=True)
class _Location:
    is_buy: bool
    price: float
    slot: int


class OrderBook:
    """Bids sorted best (highest) first, asks sorted best (lowest) first."""

    def __init__(self) -> None:
        self._bids: SortedDict = SortedDict(operator.neg)
        self._asks: SortedDict = SortedDict()
        self._lookup: dict[int, _Location] = {}
        self._slots = count()

    def __len__(self) -> int:
        return len(self._lookup)

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._lookup

    def _side(self, is_buy: bool) -> SortedDict:
        return self._bids if is_buy else self._asks

    def add_order(self, order: Order) -> None:
        """Insert an order at the back of its price level's queue."""
        stored = replace(order)
        side = self._side(stored.is_buy)
        level = side.get(stored.price)
        if level is None:
            level = side[stored.price] = _Level()
        slot = next(self._slots)
        level.orders[slot] = stored
        level.total_quantity += stored.quantity
        self._lookup[stored.order_id] = _Location(stored.is_buy, stored.price, slot)

    def cancel_order(self, order_id: int) -> bool:
        """Remove an order; return False if no such order rests in the book."""
        location = self._lookup.pop(order_id, None)
        if location is None:
            return False
        side = self._side(location.is_buy)
        level = side[location.price]
        order = level.orders.pop(location.slot)
        level.total_quantity -= order.quantity
        if not level.orders:
            del side[location.price]
        return True

    def amend_order(self, order_id: int, new_price: float, new_quantity: int) -> bool:
        """Change an order's price or quantity; return False if it is unknown.

        A price change re-queues the order at the back of the new level;
        a quantity-only change keeps its place in the queue.
        """
        location = self._lookup.get(order_id)
        if location is None:
            return False
        level = self._side(location.is_buy)[location.price]
        order = level.orders[location.slot]
        if order.price != new_price:
            moved = replace(order, price=new_price, quantity=new_quantity)
            self.cancel_order(order_id)
            self.add_order(moved)
        else:
            level.total_quantity += new_quantity - order.quantity
            order.quantity = new_quantity
        return True

    def snapshot(self, depth: int) -> tuple[list[PriceLevel], list[PriceLevel]]:
        """Return the top ``depth`` bid and ask levels, best first."""

        def top(side: SortedDict) -> list[PriceLevel]:
            return [
                PriceLevel(price, level.total_quantity)
                for price, level in islice(side.items(), depth)
            ]

        return top(self._bids), top(self._asks)

    def format_book(self, depth: int = 10) -> str:
        """Render the top of the book, asks above bids, highest price on top."""
        bids, asks = self.snapshot(depth)

        def row(level: PriceLevel) -> str:
            return f"  {level.total_quantity:>10} @ ${level.price:>8.2f}\n"

        parts = ["\n========== ORDER BOOK ==========\n", "\n--- ASKS (Sell Orders) ---\n"]
        parts.extend(row(level) for level in reversed(asks))
        parts.append("\n--------------------------\n")
        parts.append("--- BIDS (Buy Orders) ---\n")
        parts.extend(row(level) for level in bids)
        parts.append("==============================\n\n")
        return "".join(parts)

    def print_book(self, depth: int = 10) -> None:
        """Write the rendered book to standard output."""
        print(self.format_book(depth), end="")