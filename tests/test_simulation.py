"""Tests for simulation module."""
import pytest

from clickerengine.currency import Clickable, CurrencyDef
from clickerengine.definition import Catalog, GameConfig
from clickerengine.element import BuildingDef, UpgradeDef
from clickerengine.perk import Perk
from clickerengine.runtime import GameRuntime
from clickerengine.simulation import Simulation
from clickerengine.strategy import GreedyCheapest


def _make_catalog() -> Catalog:
    return Catalog(
        config=GameConfig(name="Sim"),
        currency=CurrencyDef("gold", percent_incr=0.0),
        clickable=Clickable("click", amount=10),
        buildings=[BuildingDef("hut", cost=3, amount=1)],
        upgrades=[UpgradeDef("whip", cost=4, perks=[Perk.building_multiply("hut", 2)])],
    )


def test_buys_repeatedly_within_a_second():
    rt = GameRuntime(_make_catalog())
    report = Simulation(rt, GreedyCheapest(clicks_per_second=1)).run(1)
    # 10 gold: the hut at 3 always undercuts the whip at 4
    kinds = [p.element_id for p in report.purchases]
    assert kinds == ["hut", "hut", "hut"]
    assert report.final_total == pytest.approx(1)


def test_no_clicks_no_income():
    rt = GameRuntime(_make_catalog())
    report = Simulation(rt, GreedyCheapest()).run(10)
    assert report.clicks == 0
    assert report.purchases == []
    assert report.final_total == 0


def test_report_tracks_final_state():
    rt = GameRuntime(_make_catalog())
    report = Simulation(rt, GreedyCheapest(clicks_per_second=1)).run(5)
    assert report.buildings == dict(rt.get_progress().buildings)
    assert report.upgrades == rt.get_progress().upgrades
    assert report.final_rate == pytest.approx(rt.per_second_amount())


def test_describe():
    assert GreedyCheapest().describe() == "GreedyCheapest"
    assert GreedyCheapest(clicks_per_second=4).describe() == "GreedyCheapest (4 CPS)"
