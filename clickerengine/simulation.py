from __future__ import annotations

from dataclasses import dataclass, field

from clickerengine.runtime import GameRuntime
from clickerengine.strategy import Strategy


@dataclass
class PurchaseEvent:
    time: int
    element_id: str
    kind: str
    cost: float


@dataclass
class PlayReport:
    """Outcome of an autoplay run."""

    strategy_description: str = ""
    seconds: int = 0
    clicks: int = 0
    click_earned: float = 0.0
    tick_earned: float = 0.0
    final_total: float = 0.0
    final_rate: float = 0.0
    purchases: list[PurchaseEvent] = field(default_factory=list)
    buildings: dict[str, int] = field(default_factory=dict)
    upgrades: list[str] = field(default_factory=list)


class Simulation:
    """Plays a runtime headlessly, one tick per simulated second."""

    def __init__(self, runtime: GameRuntime, strategy: Strategy) -> None:
        self.runtime = runtime
        self.strategy = strategy

    def run(self, seconds: int) -> PlayReport:
        report = PlayReport(strategy_description=self.strategy.describe())
        progress = self.runtime.get_progress()

        for second in range(1, seconds + 1):
            # 1. Clicks
            for _ in range(self.strategy.clicks_per_second):
                report.click_earned += self.runtime.click()
                report.clicks += 1

            # 2. Production
            report.tick_earned += self.runtime.tick()

            # 3. Purchases, re-evaluated after each success since costs move
            bought = True
            while bought:
                bought = False
                affordable = self.runtime.get_affordable_purchases()
                for status in self.strategy.decide_purchases(progress, affordable):
                    if self._buy(status.id, status.kind):
                        report.purchases.append(
                            PurchaseEvent(second, status.id, status.kind, status.cost)
                        )
                        bought = True
                        break

        progress = self.runtime.get_progress()
        report.seconds = seconds
        report.final_total = progress.total_amount
        report.final_rate = self.runtime.per_second_amount()
        report.buildings = dict(progress.buildings)
        report.upgrades = list(progress.upgrades)
        return report

    def _buy(self, element_id: str, kind: str) -> bool:
        if kind == "building":
            return self.runtime.buy_building(element_id)
        return self.runtime.buy_upgrade(element_id)
