"""One side of a tick order book: a dense window of slots near the top of
the book backed by a sorted map for levels that fall outside it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from sortedcontainers import SortedDict

from tickbook.levels import TickLevel

EPSILON = 1e-15
MAX_TICK = 2**32 - 1
_MAX_SLOTS = 2**16 - 1


class Side(Enum):
    """Which side of the book a ladder holds."""

    ASK = "ask"
    BID = "bid"

    @property
    def direction(self) -> int:
        """+1 if ticks grow away from the top of the book, -1 otherwise."""
        return 1 if self is Side.ASK else -1

    @property
    def initial_zero_tick(self) -> int:
        """Tick of slot 0 before any level has been seen."""
        return MAX_TICK if self is Side.ASK else 0


class SideLadder:
    """Levels of one side of the book.

    Slot ``i`` of the window holds the size at ``zero_tick + i`` for asks and
    ``zero_tick - i`` for bids, so slot 0 is always the side's most
    aggressive tick. Levels further than ``slots`` from ``zero_tick`` live in
    a sorted map. Whenever the window drifts, it is shifted so that
    ``empty_slots`` free slots remain in front of the best level.
    """

    def __init__(self, side: Side, slots: int, empty_slots: int) -> None:
        if not 0 <= empty_slots:
            raise ValueError("empty_slots must not be negative")
        if not slots < _MAX_SLOTS:
            raise ValueError(f"slots must be below {_MAX_SLOTS}")
        if not slots > empty_slots * 2:
            raise ValueError("slots must be more than twice empty_slots")
        self._side = side
        self._slots = slots
        self._empty = empty_slots
        self._zero_tick = side.initial_zero_tick
        self._best_index = 0
        self._cache: list[float] = [0.0] * slots
        self._heap: SortedDict = SortedDict()

    @property
    def side(self) -> Side:
        return self._side

    @property
    def zero_tick(self) -> int:
        """Tick held by slot 0 of the window."""
        return self._zero_tick

    @property
    def best_index(self) -> int:
        """Slot of the window that holds the best level."""
        return self._best_index

    @property
    def cache(self) -> tuple[float, ...]:
        """Sizes in the window, slot 0 first."""
        return tuple(self._cache)

    @property
    def heap(self) -> dict[int, float]:
        """Levels kept outside the window, by tick."""
        return dict(self._heap)

    def _tick_at(self, index: int) -> int:
        return self._zero_tick + self._side.direction * index

    def _offset(self, tick: int) -> int:
        return (tick - self._zero_tick) * self._side.direction

    def insert(self, level: TickLevel) -> None:
        """Set the size at ``level.tick``; a size of zero removes the level.

        The tick must not be more aggressive than ``zero_tick``.
        """
        index = self._offset(level.tick)
        if index < 0:
            raise ValueError(
                f"tick {level.tick} lies in front of the window at {self._zero_tick}"
            )
        if index < self._slots:
            self._cache[index] = level.size
        elif level.size < EPSILON:
            self._heap.pop(level.tick, None)
        else:
            self._heap[level.tick] = level.size

    def apply(self, levels: Iterable[TickLevel]) -> None:
        """Apply a side of an update, ordered best level first."""
        iterator = iter(levels)
        first = next(iterator, None)
        if first is not None:
            offset = self._offset(first.tick)
            if offset < 0:
                self._shift_toward_top(first.tick)
                self._best_index = self._offset(first.tick)
            elif offset < self._best_index:
                self._best_index = offset
            self.insert(first)
        for level in iterator:
            self.insert(level)
        self._update_best_and_shift_away()

    def best(self) -> TickLevel:
        """Return the level at the best slot of the window."""
        return TickLevel(
            tick=self._tick_at(self._best_index),
            size=self._cache[self._best_index],
        )

    def levels(self) -> Iterator[TickLevel]:
        """Yield non-empty levels from best to worst."""
        for index in range(self._best_index, self._slots):
            size = self._cache[index]
            if size >= EPSILON:
                yield TickLevel(tick=self._tick_at(index), size=size)
        ticks = self._heap.keys() if self._side is Side.ASK else reversed(self._heap)
        for tick in ticks:
            yield TickLevel(tick=tick, size=self._heap[tick])

    def _shift_toward_top(self, tick: int) -> None:
        """Move the window so that ``tick`` falls inside it with spare slots."""
        if self._side is Side.ASK:
            new_zero = max(tick - self._empty, 0)
        else:
            new_zero = tick + self._empty
        shift = abs(new_zero - self._zero_tick)
        eviction_start = 0 if shift >= self._slots else self._slots - shift

        for index in range(eviction_start, self._slots):
            size = self._cache[index]
            if size > EPSILON:
                self._heap[self._tick_at(index)] = size

        kept = self._cache[:eviction_start]
        self._cache = [0.0] * (self._slots - len(kept)) + kept
        self._zero_tick = new_zero

    def _update_best_and_shift_away(self) -> None:
        """Find the best slot and recentre the window if it drifted too far."""
        if self._cache[self._best_index] > EPSILON:
            return

        first_filled = next(
            (index for index, size in enumerate(self._cache) if size > EPSILON),
            None,
        )
        if first_filled is not None:
            self._best_index = first_filled

        if self._best_index <= self._empty * 2:
            return

        shift = self._best_index - self._empty
        self._zero_tick += self._side.direction * shift
        self._best_index -= shift
        tail_start = self._slots - shift
        self._cache[self._empty:tail_start] = self._cache[self._empty + shift:]
        for index in range(tail_start, self._slots):
            self._cache[index] = self._heap.pop(self._tick_at(index), 0.0)