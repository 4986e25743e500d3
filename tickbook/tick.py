"""Decimal precision handling and tick-to-price conversion."""

from __future__ import annotations

import operator

MAX_DECIMALS = 18

DECIMAL_SHRINK_MULTIPLIERS: tuple[float, ...] = (
    1.0,
    0.1,
    0.01,
    0.001,
    0.0001,
    0.00001,
    0.000001,
    0.0000001,
    0.00000001,
    0.000000001,
    0.0000000001,
    0.00000000001,
    0.000000000001,
    0.0000000000001,
    0.00000000000001,
    0.000000000000001,
    0.0000000000000001,
    0.00000000000000001,
    0.000000000000000001,
)

DECIMAL_GROW_MULTIPLIERS: tuple[float, ...] = (
    1.0,
    10.0,
    100.0,
    1000.0,
    10000.0,
    100000.0,
    1000000.0,
    10000000.0,
    100000000.0,
    1000000000.0,
    10000000000.0,
    100000000000.0,
    1000000000000.0,
    10000000000000.0,
    100000000000000.0,
    1000000000000000.0,
    10000000000000000.0,
    100000000000000000.0,
    1000000000000000000.0,
)


class DecimalRangeError(ValueError):
    """Raised when a number of decimal places is outside 0..MAX_DECIMALS."""

    def __init__(self) -> None:
        super().__init__(
            f"invalid decimals, range must be between 0 and {MAX_DECIMALS}"
        )


class Decimals:
    """A number of decimal places, constrained to 0..MAX_DECIMALS."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        number = operator.index(value)
        if not 0 <= number <= MAX_DECIMALS:
            raise DecimalRangeError()
        self._value = number

    def value(self) -> int:
        """Return the number of decimal places."""
        return self._value

    def reference_tick_to_f64(self, tick: int) -> float:
        """Convert a tick to a price using a power computation."""
        return float(tick) * 10.0 ** -self._value

    def fast_tick_to_f64(self, tick: int) -> float:
        """Convert a tick to a price using the precomputed multiplier table."""
        return float(tick) * DECIMAL_SHRINK_MULTIPLIERS[self._value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decimals):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Decimals({self._value})"