from __future__ import annotations

from dataclasses import dataclass

from clickerengine.cost_scaling import CostScaling


@dataclass
class CurrencyDef:
    """Static definition of the game's single currency."""

    id: str
    display_name: str = ""
    percent_incr: float = 0.15

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.id

    def cost_scaling(self) -> CostScaling:
        """Default building cost curve for this currency."""
        return CostScaling.compound(self.percent_incr)


@dataclass
class Clickable:
    """The manual click source and its base yield."""

    id: str = "click"
    display_name: str = ""
    amount: float = 1.0

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.id
