"""In-memory catalog of factions and their troops."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .models import UNBOUNDED_FORMATION, Faction, Troop

WILDCARD_FORMATION = "*"


class CatalogError(ValueError):
    """Raised when faction data cannot be turned into troops."""


class Catalog:
    """Immutable lookup of factions by name, built once and passed around."""

    def __init__(self, factions: Iterable[Faction] = ()) -> None:
        self._factions: dict[str, Faction] = {f.name: f for f in factions}

    def get_faction(self, name: str) -> Faction | None:
        return self._factions.get(name)

    def has_faction(self, name: str) -> bool:
        return name in self._factions

    def faction_names(self) -> list[str]:
        return sorted(self._factions)

    def factions(self) -> list[Faction]:
        return [self._factions[name] for name in self.faction_names()]

    def troop_by_ref(self, reference: str) -> Troop | None:
        faction_name, _, _number = reference.rpartition("-")
        faction = self._factions.get(faction_name)
        return faction.troop_by_ref(reference) if faction else None

    def __len__(self) -> int:
        return len(self._factions)

    def __contains__(self, name: object) -> bool:
        return name in self._factions


def _formation(value: Any) -> int:
    if value == WILDCARD_FORMATION:
        return UNBOUNDED_FORMATION
    return int(value)


def build_faction(name: str, records: Mapping[int, Mapping[str, Any]]) -> Faction:
    """Create a faction from troop records keyed by tile number.

    Records without ``points`` only carry a name and dice; their points,
    formation, wounds and powers are copied from the most recent complete
    record with the same name.
    """

    troops: list[Troop] = []
    reference_troops: dict[str, Troop] = {}

    for number in sorted(records, key=int):
        data = records[number]
        troop_name = data["name"]
        engagement = tuple(str(face) for face in data.get("engagement") or ())
        shooting = tuple(str(face) for face in data.get("shooting") or ())

        if data.get("points") is None:
            template = reference_troops.get(troop_name)
            if template is None:
                raise CatalogError(
                    f"{name} troop {number} ({troop_name}) has no points and no complete "
                    "troop of the same name precedes it"
                )
            troop = Troop(
                faction=name,
                number=int(number),
                name=troop_name,
                points=template.points,
                formation=template.formation,
                wounds=template.wounds,
                engagement=engagement,
                shooting=shooting,
                powers=template.powers,
                complete=False,
            )
        else:
            if data.get("formation") is None:
                raise CatalogError(f"{name} troop {number} ({troop_name}) has no formation")
            troop = Troop(
                faction=name,
                number=int(number),
                name=troop_name,
                points=int(data["points"]),
                formation=_formation(data["formation"]),
                wounds=int(data.get("wounds") or 0),
                engagement=engagement,
                shooting=shooting,
                powers=tuple(data.get("powers") or ()),
            )
            reference_troops[troop_name] = troop
        troops.append(troop)

    return Faction(name=name, troops=tuple(troops))
