from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from clickerengine.element import ElementStatus

if TYPE_CHECKING:
    from clickerengine.progress import Progress


class Strategy(ABC):
    """Base class for autoplay strategies."""

    def __init__(self, clicks_per_second: int = 0) -> None:
        self.clicks_per_second = clicks_per_second

    @abstractmethod
    def decide_purchases(
        self, progress: Progress, affordable: list[ElementStatus]
    ) -> list[ElementStatus]:
        """Return ordered list of entries to attempt to buy."""
        ...

    @abstractmethod
    def describe(self) -> str: ...


class GreedyCheapest(Strategy):
    """Buy the cheapest affordable entry first."""

    def decide_purchases(
        self, progress: Progress, affordable: list[ElementStatus]
    ) -> list[ElementStatus]:
        return sorted(affordable, key=lambda s: s.cost)

    def describe(self) -> str:
        if self.clicks_per_second:
            return f"GreedyCheapest ({self.clicks_per_second} CPS)"
        return "GreedyCheapest"
