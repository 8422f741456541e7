from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clickerengine.definition import Catalog
    from clickerengine.element import BuildingDef, UpgradeDef
    from clickerengine.progress import Progress
    from clickerengine.requirement import Requirement


class UnlockEvaluator:
    """Tracks which catalog entries have ever been unlocked.

    The unlocked sets only grow: recompute() unions in whatever is satisfied
    now and never removes an id, so repeated calls are a fixed point.
    """

    def __init__(self) -> None:
        self.unlocked_buildings: set[str] = set()
        self.unlocked_upgrades: set[str] = set()

    def is_unlocked(self, requirements: list[Requirement], progress: Progress) -> bool:
        return all(r.evaluate(progress) for r in requirements)

    def can_build(self, building: BuildingDef, progress: Progress) -> bool:
        return self.is_unlocked(building.requirements, progress)

    def can_upgrade(self, upgrade: UpgradeDef, progress: Progress) -> bool:
        if progress.owns_upgrade(upgrade.id):
            return False
        return self.is_unlocked(upgrade.requirements, progress)

    def recompute(self, catalog: Catalog, progress: Progress) -> None:
        for bdef in catalog.buildings:
            if bdef.id not in self.unlocked_buildings and self.can_build(bdef, progress):
                self.unlocked_buildings.add(bdef.id)

        for udef in catalog.upgrades:
            if udef.id not in self.unlocked_upgrades and self.is_unlocked(
                udef.requirements, progress
            ):
                self.unlocked_upgrades.add(udef.id)

    def reset(self) -> None:
        self.unlocked_buildings.clear()
        self.unlocked_upgrades.clear()
