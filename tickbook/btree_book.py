"""A simple order book that replaces its whole state on every update."""

from __future__ import annotations

from sortedcontainers import SortedDict

from tickbook.levels import TickLevel, TickUpdate


class BTreeOrderBook:
    """Order book that keeps each side in a sorted map keyed by tick.

    Every update replaces both sides. The best bid and ask are refreshed
    only when the update's sequence id is not older than the one they were
    last refreshed at.
    """

    def __init__(self) -> None:
        self._best_bid: TickLevel | None = None
        self._best_ask: TickLevel | None = None
        self._bids: SortedDict = SortedDict()
        self._asks: SortedDict = SortedDict()
        self._last_sequence = 0
        self._last_bba_update_id = 0

    def process_tick_update(self, event: TickUpdate) -> None:
        """Replace the book with the levels of ``event``."""
        self._bids.clear()
        self._asks.clear()
        self._bids.update((level.tick, level) for level in event.bids)
        self._asks.update((level.tick, level) for level in event.asks)

        self._last_sequence = event.sequence_id
        if event.sequence_id < self._last_bba_update_id:
            return
        self._update_bba()

    def sequence_id(self) -> int:
        """Return the sequence id of the last processed update."""
        return self._last_sequence

    def best_bid(self) -> TickLevel | None:
        """Return the highest bid as of the last refresh."""
        return self._best_bid

    def best_ask(self) -> TickLevel | None:
        """Return the lowest ask as of the last refresh."""
        return self._best_ask

    def _update_bba(self) -> None:
        self._best_bid = self._bids.peekitem(-1)[1] if self._bids else None
        self._best_ask = self._asks.peekitem(0)[1] if self._asks else None
        self._last_bba_update_id = self._last_sequence