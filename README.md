# lobook

A limit order book that keeps bids and asks in price order and the orders at
each price in arrival (FIFO) order. Orders can be added, cancelled and amended
by id, and the book reports aggregated volume for the top price levels.

The package also has two bounded circular FIFO queues, a linked list that
takes inserts from several threads at once, and a demonstration command that
walks a book through a few scenarios and times adds, cancels and snapshots.

## Installing

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## The order book (`lobook.order_book`)

```python
from lobook.order_book import Order, OrderBook, PriceLevel

book = OrderBook()
book.add_order(Order(order_id=1, is_buy=True, price=100.0, quantity=50, timestamp_ns=0))
book.add_order(Order(order_id=2, is_buy=True, price=100.0, quantity=30, timestamp_ns=1))
book.add_order(Order(order_id=3, is_buy=False, price=101.0, quantity=40, timestamp_ns=2))

bids, asks = book.snapshot(5)
# bids == [PriceLevel(price=100.0, total_quantity=80)]
# asks == [PriceLevel(price=101.0, total_quantity=40)]

book.cancel_order(2)                # True; False when the id is unknown
book.amend_order(1, 100.0, 75)      # quantity change keeps the order's place
book.amend_order(1, 99.5, 75)       # price change moves it to the back of the new level

len(book)                           # number of resting orders
1 in book                           # whether an order id rests in the book

print(book.format_book(10))         # the text that book.print_book(10) writes
```

- `Order` is a dataclass with `order_id`, `is_buy`, `price`, `quantity` and
  `timestamp_ns` (default `0`). `add_order` stores a copy, so changing the
  object afterwards does not change the book.
- `snapshot(depth)` returns a pair of lists of `PriceLevel` records: bids from
  the highest price down and asks from the lowest price up, at most `depth` of
  each. A price level disappears once its last order is cancelled or moved.
- `amend_order(order_id, new_price, new_quantity)` returns `False` for an
  unknown id. With the same price it only changes the quantity; with a new
  price it cancels the order and adds it again at the new price.
- `format_book(depth=10)` renders asks (highest price on top) above bids, each
  line showing total quantity and price to two decimals; `print_book(depth=10)`
  writes that text to standard output.

### What the book does not do

The book only rests orders. It does not match them: a buy priced at or above
the best ask, or a sell at or below the best bid, is simply added to its side
and no trades are produced. There is no persistence and no network interface.

## FIFO queues (`lobook.fifo`)

`Fifo` is a bounded circular queue for use from one thread. `SpscFifo` has the
same interface and is safe with one producer thread and one consumer thread.
Both take a capacity (a negative one raises `ValueError`), expose it as the
`capacity` property, and support `len()`, `empty()` and `full()`.

```python
from lobook.fifo import Fifo, FifoEmpty

queue = Fifo(2)
queue.push("a")      # True
queue.push("b")      # True
queue.push("c")      # False: the queue is full
queue.pop()          # "a"
queue.pop()          # "b"
try:
    queue.pop()
except FifoEmpty:
    pass
```

## Concurrent list (`lobook.linked_list`)

`ConcurrentList.insert(value)` puts each new value at the head and may be
called from several threads at once. The list can be iterated (newest first)
and measured with `len()`; `format()` gives the values from head to tail,
separated by spaces.

```python
from lobook.linked_list import ConcurrentList

items = ConcurrentList()
for value in (10, 20, 30):
    items.insert(value)
items.format()       # "30 20 10"
```

## Demonstration (`lobook.demo`)

```
lobook-demo
```

runs a series of scenarios against fresh books (adding, cancelling, amending,
snapshots at several depths, removal within one price level), printing the book
along the way, and then times a benchmark: adding orders, cancelling every
even id, and taking repeated depth-10 snapshots. It exits with status 0 when
every check passes and 1, with a message on standard error, when one fails.

Options:

- `--orders N` – orders added in the benchmark (default 10000)
- `--snapshots N` – snapshots taken in the benchmark (default 1000)

The benchmark is also available from Python:

```python
from lobook.demo import run_benchmark

result = run_benchmark(num_orders=1000, snapshots=100)
result.remaining     # 500: the odd-numbered orders still resting
result.add_us, result.cancel_us, result.snapshot_us   # elapsed microseconds
```

`timestamp_ns()` returns the current wall-clock time in nanoseconds.