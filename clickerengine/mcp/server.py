"""MCP server wrapping GameRuntime for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mcp.server.fastmcp import FastMCP

from clickerengine.definition import Catalog
from clickerengine.element import ElementStatus
from clickerengine.errors import SaveLoadError
from clickerengine.runtime import GameRuntime
from clickerengine.save import KeyValueStore

# Maximum seconds per wait() call (24 hours)
_MAX_WAIT = 86400
# Maximum clicks per click() call
_MAX_CLICKS = 1000


@dataclass
class _GameHolder:
    """Holds the active catalog, runtime and in-memory save slots."""

    catalog: Catalog
    runtime: GameRuntime
    saves: dict[str, str] = field(default_factory=dict)


def _status_entry(s: ElementStatus) -> dict[str, Any]:
    return {
        "id": s.id,
        "display_name": s.display_name,
        "kind": s.kind,
        "count": s.count,
        "cost": round(s.cost, 2),
        "affordable": s.affordable,
    }


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_game_info(holder: _GameHolder) -> dict[str, Any]:
    cat = holder.catalog
    return {
        "name": cat.config.name,
        "currency": {
            "id": cat.currency.id,
            "display_name": cat.currency.display_name,
            "percent_incr": cat.currency.percent_incr,
        },
        "clickable": {"id": cat.clickable.id, "amount": cat.clickable.amount},
        "buildings": [
            {
                "id": b.id,
                "display_name": b.display_name,
                "cost": b.cost,
                "amount": b.amount,
            }
            for b in cat.buildings
        ],
        "upgrades": [
            {
                "id": u.id,
                "display_name": u.display_name,
                "cost": u.cost,
                "perks": [
                    {
                        "target": p.target.kind.name,
                        "target_id": p.target.id,
                        "operation": p.operation.name,
                        "amount": p.amount,
                    }
                    for p in u.perks
                ],
            }
            for u in cat.upgrades
        ],
    }


def _tool_get_game_state(holder: _GameHolder) -> dict[str, Any]:
    rt = holder.runtime
    progress = rt.get_progress()
    return {
        "total_amount": round(progress.total_amount, 2),
        "click_amount": round(rt.click_amount(), 4),
        "per_second": round(rt.per_second_amount(), 4),
        "buildings": dict(progress.buildings),
        "upgrades": list(progress.upgrades),
        "unlocked_buildings": sorted(rt.unlocks.unlocked_buildings),
        "unlocked_upgrades": sorted(rt.unlocks.unlocked_upgrades),
    }


def _tool_get_available_purchases(holder: _GameHolder) -> dict[str, Any]:
    return {
        "purchases": [
            _status_entry(s) for s in holder.runtime.get_available_purchases()
        ]
    }


def _tool_buy_building(holder: _GameHolder, building_id: str) -> dict[str, Any]:
    bdef = holder.catalog.get_building(building_id)
    if bdef is None:
        return {"error": f"Unknown building: {building_id!r}"}

    rt = holder.runtime
    if not rt.unlocks.can_build(bdef, rt.get_progress()):
        return {"success": False, "reason": "Not available (requirements not met)"}

    cost = rt.building_cost(building_id)
    if rt.buy_building(building_id):
        return {
            "success": True,
            "building_id": building_id,
            "cost": cost,
            "new_count": rt.get_progress().building_count(building_id),
        }
    return {"success": False, "reason": "Cannot afford"}


def _tool_buy_upgrade(holder: _GameHolder, upgrade_id: str) -> dict[str, Any]:
    udef = holder.catalog.get_upgrade(upgrade_id)
    if udef is None:
        return {"error": f"Unknown upgrade: {upgrade_id!r}"}

    rt = holder.runtime
    progress = rt.get_progress()
    if progress.owns_upgrade(upgrade_id):
        return {"success": False, "reason": "Already owned"}
    if not rt.unlocks.can_upgrade(udef, progress):
        return {"success": False, "reason": "Not available (requirements not met)"}

    if rt.buy_upgrade(upgrade_id):
        return {"success": True, "upgrade_id": upgrade_id, "cost": udef.cost}
    return {"success": False, "reason": "Cannot afford"}


def _tool_building_cost(holder: _GameHolder, building_id: str) -> dict[str, Any]:
    if holder.catalog.get_building(building_id) is None:
        return {"error": f"Unknown building: {building_id!r}"}
    return {
        "building_id": building_id,
        "owned": holder.runtime.get_progress().building_count(building_id),
        "cost": holder.runtime.building_cost(building_id),
    }


def _tool_click(holder: _GameHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_CLICKS:
        return {"error": f"Count cannot exceed {_MAX_CLICKS}"}

    total = 0.0
    for _ in range(count):
        total += holder.runtime.click()
    return {
        "clicks": count,
        "total_earned": round(total, 2),
        "new_balance": round(holder.runtime.get_progress().total_amount, 2),
    }


def _tool_wait(holder: _GameHolder, seconds: int) -> dict[str, Any]:
    if seconds < 1:
        return {"error": "Seconds must be at least 1"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds (24h) per call"}

    before_b = set(holder.runtime.unlocks.unlocked_buildings)
    before_u = set(holder.runtime.unlocks.unlocked_upgrades)

    earned = 0.0
    for _ in range(seconds):
        earned += holder.runtime.tick()

    result: dict[str, Any] = {
        "waited": seconds,
        "earned": round(earned, 2),
        "new_balance": round(holder.runtime.get_progress().total_amount, 2),
    }
    new_unlocks = sorted(
        (holder.runtime.unlocks.unlocked_buildings - before_b)
        | (holder.runtime.unlocks.unlocked_upgrades - before_u)
    )
    if new_unlocks:
        result["new_unlocks"] = new_unlocks
    return result


def _tool_save_game(holder: _GameHolder, slot: str = "default") -> dict[str, Any]:
    holder.runtime.save_progress(KeyValueStore(holder.saves, slot))
    return {"success": True, "slot": slot}


def _tool_load_game(holder: _GameHolder, slot: str = "default") -> dict[str, Any]:
    try:
        loaded = holder.runtime.load_progress(KeyValueStore(holder.saves, slot))
    except SaveLoadError as exc:
        return {"error": str(exc)}
    if not loaded:
        return {"success": False, "reason": f"No save in slot {slot!r}"}
    return {"success": True, "slot": slot}


def _tool_new_game(holder: _GameHolder) -> dict[str, Any]:
    holder.runtime.new_game()
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(catalog: Catalog) -> FastMCP:
    """Create an MCP server wrapping a GameRuntime for the given catalog."""
    holder = _GameHolder(catalog=catalog, runtime=GameRuntime(catalog))

    mcp = FastMCP(
        name=f"ClickerEngine: {catalog.config.name}",
    )

    @mcp.tool()
    def get_game_info() -> dict[str, Any]:
        """Get static game overview: currency, clickable, buildings, upgrades and their perks."""
        return _tool_get_game_info(holder)

    @mcp.tool()
    def get_game_state() -> dict[str, Any]:
        """Get current progress: total, click and per-second yield, owned and unlocked entries."""
        return _tool_get_game_state(holder)

    @mcp.tool()
    def get_available_purchases() -> dict[str, Any]:
        """Get every building and upgrade whose requirements are met, with cost."""
        return _tool_get_available_purchases(holder)

    @mcp.tool()
    def buy_building(building_id: str) -> dict[str, Any]:
        """Buy one unit of a building. Returns success/failure with reason."""
        return _tool_buy_building(holder, building_id)

    @mcp.tool()
    def buy_upgrade(upgrade_id: str) -> dict[str, Any]:
        """Buy an upgrade. Returns success/failure with reason."""
        return _tool_buy_upgrade(holder, upgrade_id)

    @mcp.tool()
    def building_cost(building_id: str) -> dict[str, Any]:
        """Get the cost of the next unit of a building."""
        return _tool_building_cost(holder, building_id)

    @mcp.tool()
    def click(count: int = 1) -> dict[str, Any]:
        """Click N times (max 1000). Returns total earned."""
        return _tool_click(holder, count)

    @mcp.tool()
    def wait(seconds: int) -> dict[str, Any]:
        """Advance the game by whole seconds (max 86400), one tick per second."""
        return _tool_wait(holder, seconds)

    @mcp.tool()
    def save_game(slot: str = "default") -> dict[str, Any]:
        """Save progress to an in-memory slot."""
        return _tool_save_game(holder, slot)

    @mcp.tool()
    def load_game(slot: str = "default") -> dict[str, Any]:
        """Load progress from an in-memory slot."""
        return _tool_load_game(holder, slot)

    @mcp.tool()
    def new_game() -> dict[str, Any]:
        """Reset the game to initial state."""
        return _tool_new_game(holder)

    return mcp
