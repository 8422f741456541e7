from __future__ import annotations


class Progress:
    """Mutable per-player save state.

    ``buildings`` maps building id to owned count; insertion order is the
    order of first acquisition. ``upgrades`` lists owned upgrade ids in the
    order they were bought, which is also the perk application order.
    """

    def __init__(
        self,
        total_amount: float = 0.0,
        buildings: dict[str, int] | None = None,
        upgrades: list[str] | None = None,
    ) -> None:
        self.total_amount: float = total_amount
        self.buildings: dict[str, int] = dict(buildings or {})
        self.upgrades: list[str] = []
        self._upgrade_ids: set[str] = set()
        for uid in upgrades or []:
            self.add_upgrade(uid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Progress):
            return NotImplemented
        return (
            self.total_amount == other.total_amount
            and list(self.buildings.items()) == list(other.buildings.items())
            and self.upgrades == other.upgrades
        )

    def __repr__(self) -> str:
        return (
            f"Progress(total_amount={self.total_amount!r}, "
            f"buildings={self.buildings!r}, upgrades={self.upgrades!r})"
        )

    # ── Queries ──────────────────────────────────────────────────────

    def building_count(self, id: str) -> int:
        return self.buildings.get(id, 0)

    def owns_building(self, id: str) -> bool:
        return id in self.buildings

    def owns_upgrade(self, id: str) -> bool:
        return id in self._upgrade_ids

    # ── Mutators ─────────────────────────────────────────────────────

    def earn(self, amount: float) -> bool:
        """Add *amount* to the total. Returns True if the total changed."""
        self.total_amount += amount
        return amount != 0

    def deduct(self, cost: float) -> bool:
        """Subtract *cost* if affordable. Returns False without mutating otherwise."""
        if self.total_amount < cost:
            return False
        self.total_amount -= cost
        return True

    def add_building(self, id: str) -> int:
        """Record one more unit of a building. Returns the new count."""
        count = self.buildings.get(id, 0) + 1
        self.buildings[id] = count
        return count

    def add_upgrade(self, id: str) -> bool:
        """Record an upgrade as owned. Returns False if it already was."""
        if id in self._upgrade_ids:
            return False
        self.upgrades.append(id)
        self._upgrade_ids.add(id)
        return True
