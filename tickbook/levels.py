"""Price level and book update records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TickLevel:
    """A price level expressed as an integer tick and a size."""

    tick: int = 0
    size: float = 0.0


@dataclass(frozen=True)
class FloatLevel:
    """A price level expressed as a float price and a size."""

    price: float = 0.0
    size: float = 0.0


@dataclass(frozen=True)
class TickUpdate:
    """A book update.

    ``asks`` must be sorted lowest to highest tick and ``bids`` highest to
    lowest tick.
    """

    sequence_id: int
    asks: tuple[TickLevel, ...] = field(default_factory=tuple)
    bids: tuple[TickLevel, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "asks", tuple(self._coerce(self.asks)))
        object.__setattr__(self, "bids", tuple(self._coerce(self.bids)))

    @staticmethod
    def _coerce(levels: Iterable[TickLevel]) -> Iterable[TickLevel]:
        return levels

    def best_bid(self) -> TickLevel | None:
        """Return the first (highest) bid, or None if there are none."""
        return self.bids[0] if self.bids else None

    def best_ask(self) -> TickLevel | None:
        """Return the first (lowest) ask, or None if there are none."""
        return self.asks[0] if self.asks else None