from __future__ import annotations

from dataclasses import dataclass, field

from clickerengine.currency import Clickable, CurrencyDef
from clickerengine.element import BuildingDef, UpgradeDef
from clickerengine.perk import TargetKind
from clickerengine.requirement import Requirement
from clickerengine.save import SaveConfig


@dataclass
class GameConfig:
    """Top-level game configuration."""

    name: str = "Untitled"
    save: SaveConfig = field(default_factory=SaveConfig)


@dataclass
class Catalog:
    """Complete static definition of a clicker game."""

    config: GameConfig = field(default_factory=GameConfig)
    currency: CurrencyDef = field(default_factory=lambda: CurrencyDef("gold"))
    clickable: Clickable = field(default_factory=Clickable)
    buildings: list[BuildingDef] = field(default_factory=list)
    upgrades: list[UpgradeDef] = field(default_factory=list)

    # Lookup dicts built in __post_init__
    _buildings_by_id: dict[str, BuildingDef] = field(
        default_factory=dict, init=False, repr=False
    )
    _upgrades_by_id: dict[str, UpgradeDef] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._buildings_by_id = {b.id: b for b in self.buildings}
        self._upgrades_by_id = {u.id: u for u in self.upgrades}

    def get_building(self, id: str) -> BuildingDef | None:
        return self._buildings_by_id.get(id)

    def get_upgrade(self, id: str) -> UpgradeDef | None:
        return self._upgrades_by_id.get(id)

    def validate(self) -> list[str]:
        """Check for catalog authoring errors. Returns list of error messages."""
        errors: list[str] = []

        # Check for duplicate IDs
        seen_b: set[str] = set()
        for b in self.buildings:
            if b.id in seen_b:
                errors.append(f"Duplicate building ID: {b.id!r}")
            seen_b.add(b.id)

        seen_u: set[str] = set()
        for u in self.upgrades:
            if u.id in seen_u:
                errors.append(f"Duplicate upgrade ID: {u.id!r}")
            seen_u.add(u.id)

        for shared in sorted(seen_b & seen_u):
            errors.append(f"ID {shared!r} is used by both a building and an upgrade")

        if self.currency.percent_incr < 0:
            errors.append(
                f"Currency {self.currency.id!r} has negative percent_incr "
                f"{self.currency.percent_incr}"
            )

        # Costs must be positive so every purchase moves the total
        for b in self.buildings:
            if b.cost <= 0:
                errors.append(f"Building {b.id!r} has non-positive cost {b.cost}")
        for u in self.upgrades:
            if u.cost <= 0:
                errors.append(f"Upgrade {u.id!r} has non-positive cost {u.cost}")

        # Check requirement references
        for b in self.buildings:
            errors.extend(self._check_requirements(f"Building {b.id!r}", b.requirements))
        for u in self.upgrades:
            errors.extend(self._check_requirements(f"Upgrade {u.id!r}", u.requirements))

        # Check perk targets
        for u in self.upgrades:
            for perk in u.perks:
                target = perk.target
                if target.kind is TargetKind.BUILDING:
                    if target.id not in seen_b:
                        errors.append(
                            f"Upgrade {u.id!r} has perk targeting unknown building {target.id!r}"
                        )
                elif target.kind is TargetKind.CLICKABLE:
                    if target.id != self.clickable.id:
                        errors.append(
                            f"Upgrade {u.id!r} has perk targeting unknown clickable {target.id!r}"
                        )
                elif target.kind is TargetKind.CURRENCY:
                    if target.id != self.currency.id:
                        errors.append(
                            f"Upgrade {u.id!r} has perk targeting unknown currency {target.id!r}"
                        )

        return errors

    def _check_requirements(
        self, owner: str, requirements: list[Requirement]
    ) -> list[str]:
        errors: list[str] = []
        for req in requirements:
            if req.building is not None and req.building not in self._buildings_by_id:
                errors.append(f"{owner} requires unknown building {req.building!r}")
            if req.upgrade is not None and req.upgrade not in self._upgrades_by_id:
                errors.append(f"{owner} requires unknown upgrade {req.upgrade!r}")
        return errors
