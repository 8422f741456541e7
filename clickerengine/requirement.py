from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clickerengine.progress import Progress


@dataclass(frozen=True)
class Requirement:
    """A gate on purchase and visibility.

    Every condition that is set must hold: the required upgrade is owned, the
    required building is owned (any count), and the accumulated total has
    reached ``unlock_amount``.
    """

    upgrade: str | None = None
    building: str | None = None
    unlock_amount: float = 0.0

    def evaluate(self, progress: Progress) -> bool:
        if self.upgrade is not None and not progress.owns_upgrade(self.upgrade):
            return False
        if self.building is not None and not progress.owns_building(self.building):
            return False
        return progress.total_amount >= self.unlock_amount


# ── Public factory ───────────────────────────────────────────────────


class Req:
    """Factory for the common single-condition requirements."""

    @staticmethod
    def amount(threshold: float) -> Requirement:
        return Requirement(unlock_amount=threshold)

    @staticmethod
    def owns_building(building_id: str, threshold: float = 0.0) -> Requirement:
        return Requirement(building=building_id, unlock_amount=threshold)

    @staticmethod
    def owns_upgrade(upgrade_id: str, threshold: float = 0.0) -> Requirement:
        return Requirement(upgrade=upgrade_id, unlock_amount=threshold)
