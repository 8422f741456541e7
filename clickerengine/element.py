from __future__ import annotations

from dataclasses import dataclass, field

from clickerengine.cost_scaling import CostScaling
from clickerengine.perk import UpgradePerk
from clickerengine.requirement import Requirement


@dataclass
class BuildingDef:
    """Static definition of a repeatable, per-second producing purchase."""

    id: str
    display_name: str = ""
    description: str = ""
    cost: float = 0.0
    amount: float = 0.0
    requirements: list[Requirement] = field(default_factory=list)
    cost_scaling: CostScaling | None = None

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.id


@dataclass
class UpgradeDef:
    """Static definition of a one-time purchase granting perks."""

    id: str
    display_name: str = ""
    description: str = ""
    cost: float = 0.0
    perks: list[UpgradePerk] = field(default_factory=list)
    requirements: list[Requirement] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.id


@dataclass(frozen=True)
class ElementStatus:
    """Read-only snapshot of a building or upgrade for query results."""

    id: str
    display_name: str
    kind: str
    count: int
    unlocked: bool
    purchasable: bool
    affordable: bool
    cost: float
