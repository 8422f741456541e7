from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TargetKind(Enum):
    CLICKABLE = auto()
    BUILDING = auto()
    CURRENCY = auto()


class PerkOperation(Enum):
    ADD = auto()
    MULTIPLY = auto()


@dataclass(frozen=True)
class PerkTarget:
    """The single entity a perk modifies, keyed by catalog id."""

    kind: TargetKind
    id: str

    @classmethod
    def clickable(cls, id: str = "click") -> PerkTarget:
        return cls(TargetKind.CLICKABLE, id)

    @classmethod
    def building(cls, id: str) -> PerkTarget:
        return cls(TargetKind.BUILDING, id)

    @classmethod
    def currency(cls, id: str) -> PerkTarget:
        return cls(TargetKind.CURRENCY, id)


@dataclass(frozen=True)
class UpgradePerk:
    """A modifier granted by an owned upgrade."""

    target: PerkTarget
    operation: PerkOperation
    amount: float

    def apply(self, value: float) -> float:
        if self.operation is PerkOperation.ADD:
            return value + self.amount
        return value * self.amount


class Perk:
    """Convenience constructors for common perk patterns."""

    @staticmethod
    def click_add(amount: float, clickable: str = "click") -> UpgradePerk:
        return UpgradePerk(PerkTarget.clickable(clickable), PerkOperation.ADD, amount)

    @staticmethod
    def click_multiply(amount: float, clickable: str = "click") -> UpgradePerk:
        return UpgradePerk(
            PerkTarget.clickable(clickable), PerkOperation.MULTIPLY, amount
        )

    @staticmethod
    def building_add(building: str, amount: float) -> UpgradePerk:
        return UpgradePerk(PerkTarget.building(building), PerkOperation.ADD, amount)

    @staticmethod
    def building_multiply(building: str, amount: float) -> UpgradePerk:
        return UpgradePerk(
            PerkTarget.building(building), PerkOperation.MULTIPLY, amount
        )

    @staticmethod
    def currency_add(currency: str, amount: float) -> UpgradePerk:
        return UpgradePerk(PerkTarget.currency(currency), PerkOperation.ADD, amount)

    @staticmethod
    def currency_multiply(currency: str, amount: float) -> UpgradePerk:
        return UpgradePerk(
            PerkTarget.currency(currency), PerkOperation.MULTIPLY, amount
        )
