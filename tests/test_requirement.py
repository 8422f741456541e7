"""Tests for requirement module."""
from clickerengine.progress import Progress
from clickerengine.requirement import Req, Requirement


def _make_progress() -> Progress:
    """Create a Progress with known values."""
    return Progress(
        total_amount=150.0,
        buildings={"farm": 3},
        upgrades=["gloves"],
    )


def test_empty_requirement_always_met():
    assert Requirement().evaluate(Progress())


def test_amount():
    progress = _make_progress()
    assert Req.amount(150).evaluate(progress)
    assert not Req.amount(151).evaluate(progress)


def test_owns_building_is_membership_only():
    progress = _make_progress()
    assert Req.owns_building("farm").evaluate(progress)
    assert not Req.owns_building("mine").evaluate(progress)


def test_owns_upgrade():
    progress = _make_progress()
    assert Req.owns_upgrade("gloves").evaluate(progress)
    assert not Req.owns_upgrade("boots").evaluate(progress)


def test_all_conditions_must_hold():
    progress = _make_progress()
    req = Requirement(upgrade="gloves", building="farm", unlock_amount=100)
    assert req.evaluate(progress)


def test_amount_met_but_building_missing():
    progress = _make_progress()
    req = Requirement(building="mine", unlock_amount=100)
    assert progress.total_amount == 150
    assert not req.evaluate(progress)


def test_building_owned_but_amount_short():
    progress = _make_progress()
    assert not Req.owns_building("farm", 1000).evaluate(progress)


def test_upgrade_missing_fails_combined():
    progress = _make_progress()
    req = Requirement(upgrade="boots", building="farm", unlock_amount=0)
    assert not req.evaluate(progress)
