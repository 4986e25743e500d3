"""An order book keeping a dense window of slots near the top of each side."""

from __future__ import annotations

from collections.abc import Iterator

from tabulate import tabulate

from tickbook.ladder import Side, SideLadder
from tickbook.levels import FloatLevel, TickLevel, TickUpdate
from tickbook.tick import Decimals


class OrderBook:
    """Incrementally updated order book.

    Each side keeps ``slots`` dense slots starting at its most aggressive
    tick, with ``empty_slots`` kept free in front of the best level when the
    window is moved. Levels outside the window are kept in a sorted map.
    Updates are applied in whatever order they arrive.
    """

    def __init__(
        self,
        tick_decimals: Decimals | int,
        slots: int = 128,
        empty_slots: int = 32,
    ) -> None:
        if not isinstance(tick_decimals, Decimals):
            tick_decimals = Decimals(tick_decimals)
        self._tick_decimals = tick_decimals
        self._sequence_id = 0
        self._ask_ladder = SideLadder(Side.ASK, slots, empty_slots)
        self._bid_ladder = SideLadder(Side.BID, slots, empty_slots)

    def _to_float(self, level: TickLevel) -> FloatLevel:
        return FloatLevel(
            price=self._tick_decimals.fast_tick_to_f64(level.tick),
            size=level.size,
        )

    def best_bid(self) -> FloatLevel:
        """Return the level at the best bid slot."""
        return self._to_float(self._bid_ladder.best())

    def best_ask(self) -> FloatLevel:
        """Return the level at the best ask slot."""
        return self._to_float(self._ask_ladder.best())

    def asks(self) -> Iterator[FloatLevel]:
        """Yield non-empty ask levels, lowest price first."""
        return (self._to_float(level) for level in self._ask_ladder.levels())

    def bids(self) -> Iterator[FloatLevel]:
        """Yield non-empty bid levels, highest price first."""
        return (self._to_float(level) for level in self._bid_ladder.levels())

    def sequence_id(self) -> int:
        """Return the sequence id of the last processed update."""
        return self._sequence_id

    def process_tick_update(self, update: TickUpdate) -> None:
        """Apply ``update`` to the book; ordering of updates is not checked."""
        self._sequence_id = update.sequence_id
        self._ask_ladder.apply(update.asks)
        self._bid_ladder.apply(update.bids)

    def __str__(self) -> str:
        asks = list(self.asks())
        asks.reverse()
        rows = [(level.price, level.size) for level in [*asks, *self.bids()]]
        table = tabulate(rows, headers=["price", "size"], tablefmt="rounded_outline")
        return f"OrderBook @ {self._sequence_id}\n{table}"