"""Cookie-themed sample catalog."""
from __future__ import annotations

from clickerengine.currency import Clickable, CurrencyDef
from clickerengine.definition import Catalog, GameConfig
from clickerengine.element import BuildingDef, UpgradeDef
from clickerengine.perk import Perk
from clickerengine.requirement import Req, Requirement
from clickerengine.save import SaveConfig, SaveType


def define_catalog() -> Catalog:
    return Catalog(
        config=GameConfig(
            name="Cookie Clicker",
            save=SaveConfig(save_type=SaveType.FILE, save_name="cookies"),
        ),
        currency=CurrencyDef("cookies", display_name="Cookies", percent_incr=0.15),
        clickable=Clickable("big_cookie", display_name="Big Cookie", amount=1.0),
        buildings=[
            BuildingDef(
                id="cursor",
                display_name="Cursor",
                cost=15,
                amount=0.1,
            ),
            BuildingDef(
                id="grandma",
                display_name="Grandma",
                cost=100,
                amount=1.0,
                requirements=[Req.owns_building("cursor")],
            ),
            BuildingDef(
                id="farm",
                display_name="Farm",
                cost=1100,
                amount=8.0,
                requirements=[Req.owns_building("grandma", 500)],
            ),
            BuildingDef(
                id="mine",
                display_name="Mine",
                cost=12000,
                amount=47.0,
                requirements=[Req.owns_building("farm", 5000)],
            ),
        ],
        upgrades=[
            UpgradeDef(
                id="reinforced_finger",
                display_name="Reinforced Index Finger",
                description="Clicks earn one more cookie.",
                cost=100,
                perks=[Perk.click_add(1.0, "big_cookie")],
                requirements=[Req.owns_building("cursor")],
            ),
            UpgradeDef(
                id="carpal_tunnel",
                display_name="Carpal Tunnel Prevention Cream",
                description="Clicks are twice as efficient.",
                cost=500,
                perks=[Perk.click_multiply(2.0, "big_cookie")],
                requirements=[Req.owns_upgrade("reinforced_finger")],
            ),
            UpgradeDef(
                id="forwards_from_grandma",
                display_name="Forwards from Grandma",
                description="Grandmas are twice as efficient.",
                cost=1000,
                perks=[Perk.building_multiply("grandma", 2.0)],
                requirements=[Req.owns_building("grandma", 1000)],
            ),
            UpgradeDef(
                id="cheap_hoes",
                display_name="Cheap Hoes",
                description="Farms produce one more cookie per second each.",
                cost=11000,
                perks=[Perk.building_add("farm", 1.0)],
                requirements=[Requirement(building="farm", unlock_amount=5000)],
            ),
            UpgradeDef(
                id="lucky_day",
                display_name="Lucky Day",
                description="All cookie income is multiplied by 1.1.",
                cost=25000,
                perks=[
                    Perk.currency_multiply("cookies", 1.1),
                ],
                requirements=[
                    Requirement(upgrade="carpal_tunnel", building="mine", unlock_amount=20000),
                ],
            ),
        ],
    )
