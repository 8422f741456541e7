"""Integration test with the cookie clicker sample catalog."""
import sys
import os

import pytest

# Ensure examples can be imported
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from examples.cookie_clicker import define_catalog
from clickerengine.formatting import format_catalog, format_text_report
from clickerengine.runtime import GameRuntime
from clickerengine.simulation import Simulation
from clickerengine.strategy import GreedyCheapest


def test_cookie_catalog_validates():
    cat = define_catalog()
    errors = cat.validate()
    assert errors == [], f"Validation errors: {errors}"


def test_cookie_autoplay():
    runtime = GameRuntime(define_catalog())
    sim = Simulation(runtime, GreedyCheapest(clicks_per_second=5))
    report = sim.run(600)

    assert report.seconds == 600
    assert report.clicks == 3000
    assert report.purchases, "Expected at least one purchase"
    assert "cursor" in report.buildings
    assert "grandma" in report.buildings
    assert "reinforced_finger" in report.upgrades

    spent = sum(p.cost for p in report.purchases)
    earned = report.click_earned + report.tick_earned
    assert report.final_total == pytest.approx(earned - spent)
    assert report.final_total >= 0


def test_cookie_purchases_respect_requirements():
    runtime = GameRuntime(define_catalog())
    report = Simulation(runtime, GreedyCheapest(clicks_per_second=5)).run(300)
    first_seen: dict[str, int] = {}
    for p in report.purchases:
        first_seen.setdefault(p.element_id, p.time)
    # Grandma needs a cursor first; carpal tunnel needs the finger upgrade
    if "grandma" in first_seen:
        assert first_seen["cursor"] <= first_seen["grandma"]
    if "carpal_tunnel" in first_seen:
        assert first_seen["reinforced_finger"] <= first_seen["carpal_tunnel"]


def test_cookie_report_formats():
    runtime = GameRuntime(define_catalog())
    report = Simulation(runtime, GreedyCheapest(clicks_per_second=2)).run(60)
    text = format_text_report(report)
    assert "Clicker Autoplay Report" in text
    assert "GreedyCheapest (2 CPS)" in text

    overview = format_catalog(define_catalog())
    assert "Cookie Clicker" in overview
    assert "grandma" in overview
