from __future__ import annotations

import logging
from typing import Any

from clickerengine.definition import Catalog
from clickerengine.element import BuildingDef, ElementStatus
from clickerengine.errors import CatalogError
from clickerengine.events import Notification, Observer, Observers
from clickerengine.perk import PerkTarget
from clickerengine.perks import PerkResolver
from clickerengine.progress import Progress
from clickerengine.save import (
    ProgressStore,
    dumps,
    loads,
    open_store,
    progress_from_snapshot,
    progress_to_snapshot,
)
from clickerengine.unlocks import UnlockEvaluator

log = logging.getLogger(__name__)


class GameRuntime:
    """Authoritative game logic processor."""

    def __init__(self, catalog: Catalog) -> None:
        errors = catalog.validate()
        if errors:
            raise CatalogError(errors)

        self.catalog = catalog
        self.progress = Progress()
        self.perks = PerkResolver(catalog)
        self.unlocks = UnlockEvaluator()
        self.observers = Observers()
        self._store: ProgressStore | None = None

        # Initialize unlocks so entries without requirements show up before any action
        self.unlocks.recompute(self.catalog, self.progress)

    # ── Player actions ───────────────────────────────────────────────

    def click(self) -> float:
        """Process one manual click. Returns the amount earned."""
        amount = self.click_amount()
        updated = self.progress.earn(amount)
        self._update_unlocks()
        if updated:
            self._notify(Notification.TICK)
        return amount

    def tick(self) -> float:
        """Collect one second of building production. Returns the amount earned."""
        amount = self.per_second_amount()
        updated = self.progress.earn(amount)
        self._update_unlocks()
        if updated:
            self._notify(Notification.TICK)
        return amount

    def buy_building(self, building_id: str) -> bool:
        """Attempt to purchase one unit of a building. Returns True on success."""
        bdef = self.catalog.get_building(building_id)
        if bdef is None:
            log.debug("buy_building: unknown building %r", building_id)
            return False

        if not self.unlocks.can_build(bdef, self.progress):
            log.debug("buy_building: requirements not met for %r", building_id)
            return False

        cost = self._building_cost(bdef)
        if not self._deduct(cost):
            log.debug("buy_building: cannot afford %r (cost %s)", building_id, cost)
            return False

        count = self.progress.add_building(building_id)
        log.info("Bought building %r (now %d) for %s", building_id, count, cost)

        self._update_unlocks()
        self._notify_deducted(cost)
        self._notify(Notification.BUY_BUILDING)
        return True

    def buy_upgrade(self, upgrade_id: str) -> bool:
        """Attempt to purchase an upgrade. Returns True on success."""
        udef = self.catalog.get_upgrade(upgrade_id)
        if udef is None:
            log.debug("buy_upgrade: unknown upgrade %r", upgrade_id)
            return False

        # Covers both already-owned and unmet requirements
        if not self.unlocks.can_upgrade(udef, self.progress):
            log.debug("buy_upgrade: %r is owned or locked", upgrade_id)
            return False

        if not self._deduct(udef.cost):
            log.debug("buy_upgrade: cannot afford %r (cost %s)", upgrade_id, udef.cost)
            return False

        self.progress.add_upgrade(upgrade_id)
        log.info("Bought upgrade %r for %s", upgrade_id, udef.cost)

        self._update_unlocks()
        self._notify_deducted(udef.cost)
        self._notify(Notification.BUY_UPGRADE)
        return True

    def new_game(self) -> None:
        """Discard all progress and unlocks."""
        self.progress = Progress()
        self.unlocks.reset()
        self._update_unlocks()
        self._notify_all()

    # ── Queries ──────────────────────────────────────────────────────

    def get_progress(self) -> Progress:
        """Return live reference to progress."""
        return self.progress

    def click_amount(self) -> float:
        """Amount the next click would earn."""
        clickable = self.catalog.clickable
        amount = self.perks.apply(
            clickable.amount, PerkTarget.clickable(clickable.id), self.progress
        )
        return self._apply_currency_perks(amount)

    def per_second_amount(self) -> float:
        """Amount the next tick would earn."""
        amount = 0.0
        for bid, count in self.progress.buildings.items():
            bdef = self.catalog.get_building(bid)
            if bdef is None:
                continue
            per_unit = self.perks.apply(
                bdef.amount, PerkTarget.building(bid), self.progress
            )
            amount += per_unit * count
        return self._apply_currency_perks(amount)

    def building_cost(self, building_id: str) -> float:
        """Cost of the next unit of a building at the current owned count.

        The first unit costs the plain base cost; later units follow the
        truncated scaling curve.
        """
        bdef = self.catalog.get_building(building_id)
        if bdef is None:
            raise KeyError(building_id)
        return self._building_cost(bdef)

    def upgrade_cost(self, upgrade_id: str) -> float:
        udef = self.catalog.get_upgrade(upgrade_id)
        if udef is None:
            raise KeyError(upgrade_id)
        return udef.cost

    def get_building_statuses(self) -> list[ElementStatus]:
        """Snapshot of every building in catalog order."""
        result: list[ElementStatus] = []
        total = self.progress.total_amount
        for bdef in self.catalog.buildings:
            cost = self._building_cost(bdef)
            result.append(
                ElementStatus(
                    id=bdef.id,
                    display_name=bdef.display_name,
                    kind="building",
                    count=self.progress.building_count(bdef.id),
                    unlocked=bdef.id in self.unlocks.unlocked_buildings,
                    purchasable=self.unlocks.can_build(bdef, self.progress),
                    affordable=total >= cost,
                    cost=cost,
                )
            )
        return result

    def get_upgrade_statuses(self) -> list[ElementStatus]:
        """Snapshot of every upgrade in catalog order."""
        result: list[ElementStatus] = []
        total = self.progress.total_amount
        for udef in self.catalog.upgrades:
            result.append(
                ElementStatus(
                    id=udef.id,
                    display_name=udef.display_name,
                    kind="upgrade",
                    count=1 if self.progress.owns_upgrade(udef.id) else 0,
                    unlocked=udef.id in self.unlocks.unlocked_upgrades,
                    purchasable=self.unlocks.can_upgrade(udef, self.progress),
                    affordable=total >= udef.cost,
                    cost=udef.cost,
                )
            )
        return result

    def get_available_purchases(self) -> list[ElementStatus]:
        """Buildings and upgrades that could be bought now, ignoring funds."""
        return [
            s
            for s in self.get_building_statuses() + self.get_upgrade_statuses()
            if s.purchasable
        ]

    def get_affordable_purchases(self) -> list[ElementStatus]:
        return [s for s in self.get_available_purchases() if s.affordable]

    # ── Observers ────────────────────────────────────────────────────

    def subscribe(self, kind: Notification, callback: Observer) -> None:
        self.observers.subscribe(kind, callback)

    def unsubscribe(self, kind: Notification, callback: Observer) -> None:
        self.observers.unsubscribe(kind, callback)

    # ── Persistence ──────────────────────────────────────────────────

    def save(self) -> dict[str, Any]:
        """Return a serialisable snapshot of progress."""
        return progress_to_snapshot(self.progress)

    def load(self, snapshot: dict[str, Any]) -> None:
        """Replace progress with *snapshot*, resolved against the catalog.

        Raises SaveLoadError if the snapshot references unknown ids; progress
        is left untouched in that case.
        """
        self.progress = progress_from_snapshot(self.catalog, snapshot)
        self._update_unlocks()
        self._notify_all()

    def save_progress(self, store: ProgressStore | None = None) -> None:
        """Write progress to *store*, or to the catalog's configured store."""
        target = store if store is not None else self._default_store()
        target.write(dumps(self.save()))
        log.info("Saved progress (total %.2f)", self.progress.total_amount)

    def load_progress(self, store: ProgressStore | None = None) -> bool:
        """Load progress from a store. Returns False if nothing was saved."""
        source = store if store is not None else self._default_store()
        text = source.read()
        if text is None:
            log.warning("No saved progress found; starting fresh")
            return False
        self.load(loads(text))
        log.info("Loaded progress (total %.2f)", self.progress.total_amount)
        return True

    # ── Private helpers ──────────────────────────────────────────────

    def _default_store(self) -> ProgressStore:
        if self._store is None:
            self._store = open_store(self.catalog.config.save)
        return self._store

    def _building_cost(self, bdef: BuildingDef) -> float:
        count = self.progress.building_count(bdef.id)
        if count == 0:
            return bdef.cost
        scaling = bdef.cost_scaling or self.catalog.currency.cost_scaling()
        return scaling.compute(bdef.cost, count)

    def _apply_currency_perks(self, amount: float) -> float:
        return self.perks.apply(
            amount, PerkTarget.currency(self.catalog.currency.id), self.progress
        )

    def _deduct(self, cost: float) -> bool:
        """Guarded subtraction; nothing changes when unaffordable."""
        return self.progress.deduct(cost)

    def _notify_deducted(self, cost: float) -> None:
        # Called only after the purchase is recorded in progress
        if cost != 0:
            self._notify(Notification.TICK)

    def _update_unlocks(self) -> None:
        self.unlocks.recompute(self.catalog, self.progress)

    def _notify(self, kind: Notification) -> None:
        self.observers.fire(kind, self)

    def _notify_all(self) -> None:
        self._notify(Notification.TICK)
        self._notify(Notification.BUY_BUILDING)
        self._notify(Notification.BUY_UPGRADE)
