from __future__ import annotations

from typing import Callable


class CostScaling:
    """Determines how a building's cost changes with owned count."""

    def __init__(self, fn: Callable[[float, int], float]) -> None:
        self._fn = fn

    def compute(self, base_cost: float, current_count: int) -> int:
        """Cost of the next unit, truncated to a whole amount."""
        return int(self._fn(base_cost, current_count))

    @classmethod
    def compound(cls, percent_incr: float = 0.15) -> CostScaling:
        """Cost = base * (1 + percent_incr)^count."""
        growth = 1.0 + percent_incr

        def _compute(base: float, count: int) -> float:
            return base * growth ** count

        return cls(_compute)

    @classmethod
    def custom(cls, fn: Callable[[float, int], float]) -> CostScaling:
        """Arbitrary cost function."""
        return cls(fn)
