# tickbook

A limit order book keyed by integer price ticks.

Prices are held as integer ticks together with a fixed number of decimal
places. With 2 decimals, tick `12345` is the price `123.45`. `OrderBook` keeps,
for each side, a fixed-size dense window of slots starting at that side's most
aggressive tick. Levels that fall outside the window are kept in a sorted map.
When the best level drifts too far into the window, or a new level arrives in
front of it, the window is shifted. `BTreeOrderBook` is a simpler book that
replaces both sides on every update.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

- `tickbook.tick`
  - `Decimals(value)` is a number of decimal places from 0 to
    `MAX_DECIMALS` (18). Any other value raises `DecimalRangeError`, which is
    a subclass of `ValueError`.
  - `value()` returns the number of decimal places.
  - `fast_tick_to_f64(tick)` converts a tick to a float price with a
    lookup table.
  - `reference_tick_to_f64(tick)` does the same with a power of ten.
  - The module also exports the tables `DECIMAL_SHRINK_MULTIPLIERS` and
    `DECIMAL_GROW_MULTIPLIERS`.
- `tickbook.levels`
  - `TickLevel(tick, size)` and `FloatLevel(price, size)` are frozen
    dataclasses.
  - `TickUpdate(sequence_id, asks, bids)` stores the ask and bid levels as
    tuples. Asks must be ordered from lowest to highest tick. Bids must be
    ordered from highest to lowest tick.
  - `best_ask()` and `best_bid()` return the first level of each side, or
    `None` when that side is empty.
- `tickbook.ladder`
  - `SideLadder(side, slots, empty_slots)` holds one side of the book, where
    `side` is `Side.ASK` or `Side.BID`.
  - `slots` must be below 65535 and greater than `2 * empty_slots`. Otherwise
    a `ValueError` is raised.
  - `apply(levels)` applies one side of an update, best level first.
  - `insert(level)` sets a single level. It raises `ValueError` when the tick
    lies in front of the window.
  - `best()` returns the `TickLevel` at the best slot.
  - `levels()` yields the non-empty levels from best to worst.
  - The read-only properties are `zero_tick`, `best_index`, `cache` and
    `heap`.
- `tickbook.book`
  - `OrderBook(tick_decimals, slots=128, empty_slots=32)` combines an ask
    ladder and a bid ladder. `tick_decimals` is either a `Decimals` or an int.
- `tickbook.btree_book`
  - `BTreeOrderBook()` is the simpler book described above.

A level whose size is below `1e-15` counts as empty. Sending a size of zero
removes a level.

## Usage

```python
from tickbook.book import OrderBook
from tickbook.levels import TickLevel, TickUpdate
from tickbook.tick import Decimals

book = OrderBook(Decimals(2), slots=128, empty_slots=32)

book.process_tick_update(
    TickUpdate(
        sequence_id=1,
        asks=[TickLevel(101, 5.0), TickLevel(102, 15.0)],
        bids=[TickLevel(99, 10.0), TickLevel(98, 20.0)],
    )
)

print(book.best_ask())   # FloatLevel(price=1.01, size=5.0)
print(book.best_bid())   # FloatLevel(price=0.99, size=10.0)

for level in book.asks():        # lowest price first
    print(level.price, level.size)

for level in book.bids():        # highest price first
    print(level.price, level.size)

print(book.sequence_id())
print(book)
```

`str(book)` gives a heading line `OrderBook @ <sequence id>` followed by a
table with `price` and `size` columns. The table lists the asks from highest
to lowest and then the bids from highest to lowest.

`OrderBook.best_ask()` and `best_bid()` always return a `FloatLevel`. On a
side that has no levels, the returned size is `0.0`.

`BTreeOrderBook` has the same `process_tick_update(event)` and
`sequence_id()` methods. Its `best_bid()` and `best_ask()` return a
`TickLevel`, or `None` when that side is empty. They are refreshed only when
the update's sequence id is not older than the one they were last refreshed
at.

## What it does not do

- It does not check update ordering. `OrderBook` applies every update it is
  given, in the order given.
- It does not match orders and does not track individual orders.
- It does not read market data from any feed, file or network.
- It has no command-line program.