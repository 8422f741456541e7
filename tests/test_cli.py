"""Tests for cli module."""
import json
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from clickerengine.cli import build_parser, load_game, main


def test_parser_defaults():
    args = build_parser().parse_args(["play", "examples.cookie_clicker"])
    assert args.command == "play"
    assert args.seconds == 600
    assert args.cps == 5
    assert args.save is None


def test_load_game():
    cat = load_game("examples.cookie_clicker")
    assert cat.config.name == "Cookie Clicker"


def test_load_game_without_factory():
    with pytest.raises(SystemExit):
        load_game("clickerengine.errors")


def test_info(capsys):
    main(["info", "examples.cookie_clicker"])
    out = capsys.readouterr().out
    assert "BUILDINGS:" in out
    assert "cursor" in out


def test_play_saves_and_resumes(tmp_path, capsys):
    path = tmp_path / "cookies.json"
    main([
        "play", "examples.cookie_clicker",
        "--seconds", "30", "--cps", "3", "--save", str(path),
    ])
    out = capsys.readouterr().out
    assert "Clicker Autoplay Report" in out
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["earned_buildings"]

    main([
        "play", "examples.cookie_clicker",
        "--seconds", "1", "--cps", "0", "--load", str(path), "--save", str(path),
    ])
    resumed = json.loads(path.read_text(encoding="utf-8"))
    assert resumed["earned_buildings"][0]["count"] >= saved["earned_buildings"][0]["count"]


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 0
