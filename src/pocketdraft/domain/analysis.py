"""Army points calculator and catalog consistency checks."""

from __future__ import annotations

import math
import re
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from pocketdraft.interfaces import ICatalog

from .models import Troop

_SEPARATORS = re.compile(r"[ ,]+")


@dataclass(slots=True)
class PointsReport:
    """Outcome of pricing a list of troops."""

    troops: list[Troop] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(t.points for t in self.troops)

    @property
    def victory_threshold(self) -> int:
        """Points the opponent must destroy to win: half the total, rounded half up."""

        return math.floor(self.total / 2 + 0.5)


@dataclass(frozen=True, slots=True)
class SimilarTroops:
    """Troops with identical stats across factions but different point costs."""

    signature: str
    troops: tuple[Troop, ...]


def parse_army_line(line: str) -> tuple[str, list[str]] | None:
    """Split ``"Celts 1 02 23"`` into the faction name and its tile numbers."""

    fields = [f for f in _SEPARATORS.split(line.strip()) if f]
    if not fields:
        return None
    return fields[0], fields[1:]


def calculate_points(catalog: ICatalog, lines: Iterable[str]) -> PointsReport:
    """Price every ``FACTION n1 n2 ...`` line against the catalog.

    Unknown factions and tile numbers are collected in ``unknown`` rather
    than failing the whole calculation.
    """

    report = PointsReport()
    for line in lines:
        parsed = parse_army_line(line)
        if parsed is None:
            continue
        faction_name, numbers = parsed
        faction = catalog.get_faction(faction_name)
        if faction is None:
            report.unknown.append(faction_name)
            continue
        for number in numbers:
            troop = faction.troop_by_number(int(number)) if number.isdigit() else None
            if troop is None:
                report.unknown.append(f"{faction_name} {number}")
            else:
                report.troops.append(troop)
    return report


def troop_signature(troop: Troop) -> str:
    return (
        f"s:{'-'.join(troop.shooting)}:e:{'-'.join(troop.engagement)}:f:{troop.formation}"
        f":w{troop.wounds}:p:{','.join(troop.powers)}"
    )


def find_similar_troops(catalog: ICatalog) -> list[SimilarTroops]:
    """Find troops sharing all stats whose point costs disagree.

    Backfilled copies (``Troop.complete`` is false) are left out.
    """

    groups: dict[str, list[Troop]] = defaultdict(list)
    for name in catalog.faction_names():
        faction = catalog.get_faction(name)
        if faction is None:
            continue
        for troop in faction.troops:
            if troop.complete:
                groups[troop_signature(troop)].append(troop)

    return [
        SimilarTroops(signature=signature, troops=tuple(troops))
        for signature, troops in sorted(groups.items())
        if len(troops) > 1 and len({t.points for t in troops}) > 1
    ]
