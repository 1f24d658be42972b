"""Simulated balance source standing in for an on-chain balance query.

The value ranges are a fixed contract:
  - initial balance in [0, 10), truncated to 4 fractional digits
  - jitter in [-0.05, 0.05)

The underlying draw function is injectable so tests can replay a fixed
sequence instead of `random.random`.
"""

from __future__ import annotations

import random
from decimal import ROUND_DOWN, Decimal
from typing import Callable, Iterable

from .money import quantize_balance


DrawFn = Callable[[], float]

INITIAL_BALANCE_SPAN = Decimal("10")
JITTER_SPAN = Decimal("0.1")
JITTER_OFFSET = Decimal("0.05")


class SequenceDraw:
    """Deterministic draw function replaying the given values in a cycle."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("SequenceDraw needs at least one value")
        self._index = 0

    def __call__(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


class BalanceOracle:
    def __init__(self, draw: DrawFn | None = None) -> None:
        self._draw = draw or random.random

    def _unit(self) -> Decimal:
        value = self._draw()
        if not 0.0 <= value < 1.0:
            raise ValueError(f"draw function returned {value!r}, expected a value in [0, 1)")
        return Decimal(value)

    def initial_balance(self) -> Decimal:
        """Balance reported for a freshly connected wallet."""

        # Truncate so a draw close to 1 never rounds up to 10.0000.
        return quantize_balance(self._unit() * INITIAL_BALANCE_SPAN, rounding=ROUND_DOWN)

    def jitter(self) -> Decimal:
        """Drift applied on balance refresh; the caller clamps the result at zero."""

        return self._unit() * JITTER_SPAN - JITTER_OFFSET
