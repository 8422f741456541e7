"""Tests for definition module."""
import pytest

from clickerengine.currency import Clickable, CurrencyDef
from clickerengine.definition import Catalog, GameConfig
from clickerengine.element import BuildingDef, UpgradeDef
from clickerengine.errors import CatalogError
from clickerengine.perk import Perk
from clickerengine.requirement import Req
from clickerengine.runtime import GameRuntime


def _make_catalog(**overrides) -> Catalog:
    kwargs = dict(
        config=GameConfig(name="Test"),
        currency=CurrencyDef("gold", percent_incr=0.1),
        clickable=Clickable("click", amount=1),
        buildings=[BuildingDef("farm", cost=10, amount=1)],
        upgrades=[UpgradeDef("gloves", cost=20, perks=[Perk.click_add(1)])],
    )
    kwargs.update(overrides)
    return Catalog(**kwargs)


def test_valid_catalog():
    assert _make_catalog().validate() == []


def test_lookup():
    cat = _make_catalog()
    assert cat.get_building("farm").cost == 10
    assert cat.get_upgrade("gloves").cost == 20
    assert cat.get_building("nope") is None
    assert cat.get_upgrade("nope") is None


def test_display_name_defaults_to_id():
    cat = _make_catalog()
    assert cat.get_building("farm").display_name == "farm"
    assert cat.currency.display_name == "gold"
    assert cat.clickable.display_name == "click"


def test_duplicate_building_id():
    cat = _make_catalog(
        buildings=[BuildingDef("farm", cost=10), BuildingDef("farm", cost=20)]
    )
    assert any("Duplicate building" in e for e in cat.validate())


def test_duplicate_upgrade_id():
    cat = _make_catalog(upgrades=[UpgradeDef("a", cost=1), UpgradeDef("a", cost=2)])
    assert any("Duplicate upgrade" in e for e in cat.validate())


def test_shared_id_between_kinds():
    cat = _make_catalog(upgrades=[UpgradeDef("farm", cost=1)])
    assert any("both a building and an upgrade" in e for e in cat.validate())


def test_unknown_requirement_references():
    cat = _make_catalog(
        buildings=[
            BuildingDef("farm", cost=10, requirements=[Req.owns_building("mine")]),
        ],
        upgrades=[UpgradeDef("a", cost=1, requirements=[Req.owns_upgrade("b")])],
    )
    errors = cat.validate()
    assert any("unknown building 'mine'" in e for e in errors)
    assert any("unknown upgrade 'b'" in e for e in errors)


def test_unknown_perk_targets():
    cat = _make_catalog(
        upgrades=[
            UpgradeDef(
                "a",
                cost=1,
                perks=[
                    Perk.building_add("mine", 1),
                    Perk.click_add(1, "other_click"),
                    Perk.currency_multiply("gems", 2),
                ],
            )
        ]
    )
    errors = cat.validate()
    assert len(errors) == 3


def test_non_positive_cost():
    cat = _make_catalog(
        buildings=[BuildingDef("farm", cost=0)],
        upgrades=[UpgradeDef("gloves", cost=-5)],
    )
    assert len(cat.validate()) == 2


def test_negative_percent_incr():
    cat = _make_catalog(currency=CurrencyDef("gold", percent_incr=-0.5))
    assert any("percent_incr" in e for e in cat.validate())


def test_runtime_rejects_invalid_catalog():
    cat = _make_catalog(
        buildings=[BuildingDef("farm", cost=10), BuildingDef("farm", cost=20)]
    )
    with pytest.raises(CatalogError) as excinfo:
        GameRuntime(cat)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.errors
