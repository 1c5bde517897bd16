"""Dataclasses describing Pocket Battles troops, factions, units and armies.

Troops and factions are immutable catalog entries.  Units and armies are the
mutable aggregates assembled by the drafting engine; their composition rules
are only enforced when :meth:`Unit.validate` / :meth:`Army.validate` run.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .capabilities import (
    is_auxiliary,
    is_compatible,
    is_engagement,
    is_fighting,
    is_shooting,
)

# Capacity of a unit holding no non-auxiliary troop, and of wildcard ("*") troops.
UNBOUNDED_FORMATION = 100


class CompositionError(ValueError):
    """Raised when a unit or army breaks the army building rules."""


@dataclass(frozen=True, slots=True)
class Troop:
    """A single troop tile of a faction."""

    faction: str
    number: int
    name: str
    points: int
    formation: int
    wounds: int = 0
    engagement: tuple[str, ...] = ()
    shooting: tuple[str, ...] = ()
    powers: tuple[str, ...] = ()
    # False for copies that took their stats from an earlier troop of the same name.
    complete: bool = True

    @property
    def reference(self) -> str:
        """Globally unique id, e.g. ``Celts-05``."""

        return f"{self.faction}-{self.number:02d}"

    def has_power(self, power: str) -> bool:
        return power in self.powers

    def __str__(self) -> str:
        text = f"{self.name} {self.reference}, "
        if self.shooting:
            text += f"s{'-'.join(self.shooting)}, "
        if self.engagement:
            text += f"e{'-'.join(self.engagement)}, "
        text += f"({self.points})[{self.formation}] !{self.wounds}!"
        if self.powers:
            text += f" {{{', '.join(self.powers)}}}"
        return text


@dataclass(frozen=True, slots=True)
class Faction:
    """A playable side, owning its troops in tile-number order."""

    name: str
    troops: tuple[Troop, ...]
    _by_reference: dict[str, Troop] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.troops, key=lambda t: t.number))
        object.__setattr__(self, "troops", ordered)
        object.__setattr__(self, "_by_reference", {t.reference: t for t in ordered})

    def troop_by_ref(self, reference: str) -> Troop | None:
        return self._by_reference.get(reference)

    def troop_by_number(self, number: int) -> Troop | None:
        return self.troop_by_ref(f"{self.name}-{int(number):02d}")

    def min_troop_points(self) -> int:
        """Cheapest deployment cost of any troop in the faction."""

        return min((t.points for t in self.troops), default=0)

    def __str__(self) -> str:
        return f"<Faction {self.name}>"


def _reference_key(troop: Troop) -> str:
    return troop.reference


class Unit:
    """Troops grouped together as they would be deployed."""

    def __init__(self, troops: Iterable[Troop] = ()) -> None:
        self._troops: list[Troop] = list(troops)

    @property
    def troops(self) -> list[Troop]:
        return list(self._troops)

    @property
    def size(self) -> int:
        return len(self._troops)

    def is_empty(self) -> bool:
        return not self._troops

    def __len__(self) -> int:
        return len(self._troops)

    def __iter__(self):
        return iter(self._troops)

    def __contains__(self, troop: object) -> bool:
        return troop in self._troops

    # --- aggregates ----------------------------------------------------------

    @property
    def points(self) -> int:
        return sum(t.points for t in self._troops)

    @property
    def wounds(self) -> int:
        return sum(t.wounds for t in self._troops)

    @property
    def powers(self) -> list[str]:
        """Every power of every troop, duplicates included."""

        return [power for troop in self._troops for power in troop.powers]

    @property
    def unique_powers(self) -> list[str]:
        return sorted(set(self.powers))

    @property
    def engagement_dice(self) -> list[str]:
        return [face for troop in self._troops for face in troop.engagement]

    @property
    def shooting_dice(self) -> list[str]:
        return [face for troop in self._troops for face in troop.shooting]

    @property
    def non_auxiliary_troops(self) -> list[Troop]:
        return [t for t in self._troops if not is_auxiliary(t)]

    @property
    def non_auxiliary_count(self) -> int:
        return len(self.non_auxiliary_troops)

    @property
    def min_formation(self) -> int:
        """Unit capacity: smallest formation value among non-auxiliary troops."""

        return min((t.formation for t in self.non_auxiliary_troops), default=UNBOUNDED_FORMATION)

    @property
    def is_full(self) -> bool:
        return self.non_auxiliary_count >= self.min_formation

    @property
    def has_auxiliary(self) -> bool:
        return any(is_auxiliary(t) for t in self._troops)

    @property
    def is_fighting(self) -> bool:
        return any(is_fighting(t) for t in self._troops)

    @property
    def is_shooting(self) -> bool:
        return any(is_shooting(t) for t in self._troops)

    @property
    def is_engagement(self) -> bool:
        return any(is_engagement(t) for t in self._troops)

    def contains_name(self, name: str) -> bool:
        return any(t.name == name for t in self._troops)

    def is_compatible_with(self, troop: Troop) -> bool:
        """Whether some troop already in the unit is compatible with ``troop``."""

        return any(is_compatible(member, troop) for member in self._troops)

    # --- building ------------------------------------------------------------

    def can_add(self, troop: Troop) -> bool:
        """Whether adding ``troop`` keeps the unit within the building rules."""

        if is_auxiliary(troop):
            return not self.has_auxiliary

        capacity = min(self.min_formation, troop.formation)
        new_size = self.non_auxiliary_count + 1
        # Filling the unit with this troop seals it, so it must leave it wounded.
        if new_size == capacity and self.wounds + troop.wounds < 1:
            return False
        return new_size <= capacity

    def add(self, troop: Troop) -> None:
        """Append a troop without any checking; see :meth:`can_add`."""

        self._troops.append(troop)

    def validate(self) -> None:
        if self.wounds <= 0:
            raise CompositionError(f"{self} has no wounds")
        if sum(1 for t in self._troops if is_auxiliary(t)) > 1:
            raise CompositionError(f"{self} has more than one auxiliary troop")
        if self.non_auxiliary_count > self.min_formation:
            raise CompositionError(f"{self} has more troops than its formation value")

    def sorted_troops(self) -> list[Troop]:
        return sorted(self._troops, key=_reference_key)

    def __str__(self) -> str:
        full = "full " if self.is_full else ""
        troops = ", ".join(str(t) for t in self.sorted_troops())
        return f"<Unit {full}[{self.min_formation}], troops = [{troops}]>"

    __repr__ = __str__


class Army:
    """Units drafted together for one side."""

    def __init__(self, units: Iterable[Unit] = ()) -> None:
        self._units: list[Unit] = list(units)

    @property
    def units(self) -> list[Unit]:
        return list(self._units)

    @property
    def size(self) -> int:
        return len(self._units)

    def is_empty(self) -> bool:
        return not self._units

    def __len__(self) -> int:
        return len(self._units)

    def add_unit(self, unit: Unit) -> None:
        """Append a unit; empty units are rejected, nothing else is checked."""

        if unit.is_empty():
            raise CompositionError(f"cannot add empty unit {unit}")
        self._units.append(unit)

    @property
    def troops(self) -> list[Troop]:
        return [troop for unit in self._units for troop in unit.troops]

    @property
    def points(self) -> int:
        return sum(u.points for u in self._units)

    @property
    def powers(self) -> list[str]:
        return sorted({power for unit in self._units for power in unit.powers})

    def validate(self) -> None:
        """Validate every unit, raising the first :class:`CompositionError`."""

        for unit in self._units:
            unit.validate()

    def _ordered_units(self) -> list[Unit]:
        return sorted(self._units, key=lambda u: u.sorted_troops()[0].reference)

    def summary(self, longer: bool = False) -> str:
        """Human readable listing, one unit per line."""

        lines = [f"Army {self.size} units, {self.points} points,"]
        for unit in self._ordered_units():
            line = " - " + ", ".join(f"({t.reference}) {t.name}" for t in unit.sorted_troops())
            if longer:
                line += f": ({unit.points})[{unit.min_formation}]!{unit.wounds}!"
                if unit.shooting_dice:
                    line += f" s{'-'.join(sorted(unit.shooting_dice))}"
                if unit.engagement_dice:
                    line += f" e{'-'.join(sorted(unit.engagement_dice))}"
                if unit.powers:
                    line += f" {{{', '.join(sorted(unit.powers))}}}"
            lines.append(line)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        units = "\n - ".join(str(u) for u in self._ordered_units())
        return f"<Army {self.size} units, {self.points} points, \n - {units}\n>"
