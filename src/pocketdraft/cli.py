"""Command line tools: draft armies, price army lists, audit faction data, serve the API."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import uvicorn

from pocketdraft.config import get_settings
from pocketdraft.domain.analysis import calculate_points, find_similar_troops
from pocketdraft.domain.catalog import Catalog
from pocketdraft.domain.drafting import DraftError, draft
from pocketdraft.domain.enums import Strategy
from pocketdraft.repository import YamlCatalogRepository


def _load_catalog(data_dir: Path | None) -> Catalog:
    return YamlCatalogRepository(data_dir or get_settings().data_dir).load()


def run_draft(catalog: Catalog, args: argparse.Namespace, out: TextIO) -> int:
    factions = args.factions or catalog.faction_names()
    points = args.points if args.points is not None else get_settings().default_points
    strategy = args.strategy or get_settings().default_strategy
    status = 0
    for faction in factions:
        try:
            army = draft(
                faction,
                points,
                strategy,
                catalog=catalog,
                variant=args.variant,
                seed=args.seed,
            )
        except (DraftError, ValueError) as exc:
            print(f"{faction}: {exc}", file=out)
            status = 1
            continue
        print(f"{faction}: {army.summary(longer=args.long)}", file=out)
    return status


def run_points(catalog: Catalog, lines: TextIO, out: TextIO) -> int:
    report = calculate_points(catalog, lines)
    for troop in report.troops:
        print(f"{troop.name} [{troop.reference}] is worth {troop.points}", file=out)
    for entry in report.unknown:
        print(f"Couldn't find {entry}, skipping", file=out)
    print(f"\nYour army is worth {report.total} points.", file=out)
    print(f"Your opponent needs to collect {report.victory_threshold} points to win.", file=out)
    return 0


def run_similar(catalog: Catalog, out: TextIO) -> int:
    for group in find_similar_troops(catalog):
        print(f"Similar troops for '{group.signature}':", file=out)
        for troop in group.troops:
            print(f"\t{troop.faction}: {troop.name} - worth {troop.points}", file=out)
    return 0


def run_server(args: argparse.Namespace) -> int:
    if args.reload:
        uvicorn.run("pocketdraft.api.app:app", host=args.host, port=args.port, reload=True)
    else:
        from pocketdraft.api.app import app

        uvicorn.run(app, host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pocket Battles army drafting tools")
    parser.add_argument("--data-dir", type=Path, help="Directory holding <Faction>.yaml files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every drafting step")
    commands = parser.add_subparsers(dest="command", required=True)

    drafting = commands.add_parser("draft", help="Draft an army for one or more factions")
    drafting.add_argument("factions", nargs="*", help="Faction names (default: all)")
    drafting.add_argument("-p", "--points", type=int, help="Point budget")
    drafting.add_argument(
        "-s",
        "--strategy",
        type=Strategy,
        help="Drafting strategy: simple or heuristic",
    )
    drafting.add_argument("--variant", help="Named policy variant, e.g. Celts-FastGaesatae")
    drafting.add_argument("--seed", help="Seed string for a reproducible draft")
    drafting.add_argument("-l", "--long", action="store_true", help="Show troop details")

    commands.add_parser(
        "points",
        help="Price army lists read from stdin, one 'FACTION n1 n2 ...' line per faction",
    )
    commands.add_parser("similar", help="List troops with equal stats but different points")

    serving = commands.add_parser("serve", help="Run the HTTP API")
    serving.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    serving.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    serving.add_argument("--reload", action="store_true", help="Enable autoreload (dev mode)")
    return parser


def main(
    argv: Sequence[str] | None = None,
    out: TextIO | None = None,
    stdin: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if args.command == "serve":
        return run_server(args)

    catalog = _load_catalog(args.data_dir)
    if args.command == "draft":
        return run_draft(catalog, args, out)
    if args.command == "points":
        return run_points(catalog, stdin or sys.stdin, out)
    return run_similar(catalog, out)
