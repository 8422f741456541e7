from __future__ import annotations

from typing import TYPE_CHECKING

from clickerengine.perk import PerkTarget, UpgradePerk

if TYPE_CHECKING:
    from clickerengine.definition import Catalog
    from clickerengine.progress import Progress


class PerkResolver:
    """Applies owned upgrade perks to an amount for one target."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def active_perks(self, target: PerkTarget, progress: Progress) -> list[UpgradePerk]:
        """Perks matching *target*, in acquisition then definition order."""
        result: list[UpgradePerk] = []
        for uid in progress.upgrades:
            udef = self.catalog.get_upgrade(uid)
            if udef is None:
                continue
            for perk in udef.perks:
                if perk.target == target:
                    result.append(perk)
        return result

    def apply(self, base_amount: float, target: PerkTarget, progress: Progress) -> float:
        """Run *base_amount* through every matching perk.

        Each perk acts on the running value, so an ADD followed by a MULTIPLY
        scales the added amount too.
        """
        amount = base_amount
        for perk in self.active_perks(target, progress):
            amount = perk.apply(amount)
        return amount
