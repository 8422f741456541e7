from __future__ import annotations

import argparse
import importlib
import logging
import sys

from clickerengine.definition import Catalog
from clickerengine.formatting import format_catalog, format_text_report
from clickerengine.runtime import GameRuntime
from clickerengine.save import FileStore
from clickerengine.simulation import Simulation
from clickerengine.strategy import GreedyCheapest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clickerengine",
        description="ClickerEngine: clicker game progression CLI",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log engine activity"
    )
    sub = parser.add_subparsers(dest="command")

    info = sub.add_parser("info", help="Describe a catalog")
    info.add_argument("game_module", help="Python module with define_catalog()")

    play = sub.add_parser("play", help="Autoplay a catalog")
    play.add_argument("game_module", help="Python module with define_catalog()")
    play.add_argument(
        "--seconds", type=int, default=600, help="Seconds to play (default: 600)"
    )
    play.add_argument("--cps", type=int, default=5, help="Clicks per second")
    play.add_argument("--load", default=None, help="Resume from a save file")
    play.add_argument("--save", default=None, help="Write progress to a save file")

    return parser


def load_game(module_path: str) -> Catalog:
    """Import module and call define_catalog()."""
    mod = importlib.import_module(module_path)
    if not hasattr(mod, "define_catalog"):
        print(f"Error: module {module_path!r} has no define_catalog() function")
        sys.exit(1)
    return mod.define_catalog()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )

    catalog = load_game(args.game_module)

    if args.command == "info":
        print(format_catalog(catalog))
        return

    if args.command == "play":
        runtime = GameRuntime(catalog)
        if args.load:
            runtime.load_progress(FileStore(args.load))

        sim = Simulation(runtime, GreedyCheapest(clicks_per_second=args.cps))
        report = sim.run(args.seconds)
        print(format_text_report(report))

        if args.save:
            runtime.save_progress(FileStore(args.save))
            print(f"\nProgress saved to {args.save}")
