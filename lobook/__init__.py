"""Limit order book with FIFO price levels, bounded FIFO queues, a concurrent list and a demo."""

__version__ = "1.0.0"
__all__ = ["order_book", "fifo", "linked_list", "demo"]