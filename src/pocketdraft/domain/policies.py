"""Faction drafting policies.

A policy is the set of hooks the drafting engine consults while it builds
units with the heuristic strategy:

* ``seed_units`` - initial unit definitions (lists of troop references)
* ``is_smart_fit`` - whether an already legal addition is also a good one
* ``should_recycle`` - whether a troop that fits nowhere goes back into the pool
* ``should_skip`` - whether a troop is dropped from consideration entirely

Counters kept by a policy are reset through ``reset`` together with the
engine. Factions without a dedicated policy use :class:`FactionPolicy`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from .capabilities import (
    has_engagement_support_power,
    has_shooting_support_power,
    is_auxiliary,
    is_engagement,
    is_fighting,
    is_shooting,
)
from .models import Troop, Unit

if TYPE_CHECKING:
    from .drafting import ArmyDrafter

SeedUnits = list[list[str]]


class UnknownPolicyError(ValueError):
    """Raised when a named policy variant does not exist for a faction."""


def adds_variety(
    current: Sequence[str],
    extra: Sequence[str],
    good_enough: int | None = None,
    at_least: int | None = None,
) -> bool:
    """Whether adding ``extra`` die faces to ``current`` widens the face variety.

    A unit already at ``good_enough`` distinct faces is accepted as is; the
    combined variety must otherwise reach ``at_least`` and grow.
    """

    variety = len(set(current))
    if good_enough is not None and variety >= good_enough:
        return True
    new_variety = len(set(current) | set(extra))
    if at_least is not None and new_variety < at_least:
        return False
    return variety < new_variety


class FactionPolicy:
    """Generic drafting policy used for every faction without its own."""

    name = "default"
    faction: str | None = None

    def reset(self, drafter: ArmyDrafter) -> None:
        """Clear per-draft counters."""

    def seed_units(self, drafter: ArmyDrafter, requested: SeedUnits | None) -> SeedUnits:
        return [list(refs) for refs in requested or []]

    def affordable(self, drafter: ArmyDrafter, seeds: SeedUnits) -> SeedUnits:
        """Return built-in ``seeds`` if the budget covers them, otherwise none."""

        cost = 0
        for ref in referenced_troops(seeds):
            troop = drafter.faction.troop_by_ref(ref)
            if troop is None:
                # Unknown references are reported by the engine.
                return [list(refs) for refs in seeds]
            cost += troop.points
        if cost > drafter.points:
            return []
        return [list(refs) for refs in seeds]

    def should_recycle(self, troop: Troop) -> bool:
        return False

    def should_skip(self, drafter: ArmyDrafter, troop: Troop) -> bool:
        return False

    def is_smart_fit(self, drafter: ArmyDrafter, unit: Unit, troop: Troop) -> bool:
        if is_auxiliary(troop):
            return True
        if not unit.is_compatible_with(troop):
            return False
        # Auxiliary-only units have no formation of their own yet.
        if unit.non_auxiliary_count == 0:
            return True
        if is_fighting(troop) and not unit.is_fighting:
            return True

        free_slots = unit.min_formation - unit.non_auxiliary_count
        good_enough, minimum = drafter.rules.variety.thresholds(free_slots)

        if unit.is_engagement and (is_engagement(troop) or has_engagement_support_power(troop)):
            if adds_variety(unit.engagement_dice, troop.engagement, good_enough, minimum):
                return True
        if unit.is_shooting and (is_shooting(troop) or has_shooting_support_power(troop)):
            if adds_variety(unit.shooting_dice, troop.shooting, good_enough, minimum):
                return True
        return False


class RecyclingPolicy(FactionPolicy):
    """Generic policy that recycles a fixed set of troop names."""

    recycled_names: frozenset[str] = frozenset()

    def should_recycle(self, troop: Troop) -> bool:
        return troop.name in self.recycled_names


class CeltsPolicy(RecyclingPolicy):
    """Keep both Gaesatae apart and feed them troops that widen their dice."""

    name = "Celts"
    faction = "Celts"
    recycled_names = frozenset({"Warchief"})
    smart_routines_points = 50
    elite_name = "Gaesatae"
    leader_name = "Warchief"
    default_seeds: SeedUnits = [["Celts-06"], ["Celts-05"]]

    def seed_units(self, drafter: ArmyDrafter, requested: SeedUnits | None) -> SeedUnits:
        if requested or drafter.points < self.smart_routines_points:
            return super().seed_units(drafter, requested)
        return self.affordable(drafter, self.default_seeds)

    def is_smart_fit(self, drafter: ArmyDrafter, unit: Unit, troop: Troop) -> bool:
        if drafter.points >= self.smart_routines_points and unit.contains_name(self.elite_name):
            if not drafter.pool:
                return True
            if is_auxiliary(troop) and troop.wounds > 0:
                return True
            return adds_variety(unit.engagement_dice, troop.engagement)
        if unit.contains_name(self.leader_name):
            if not drafter.pool or len(set(troop.engagement)) > 1:
                return True
        return super().is_smart_fit(drafter, unit, troop)


class CeltsFastGaesataePolicy(CeltsPolicy):
    """Pair each Gaesatae with a fast Horsemen from the start."""

    name = "Celts-FastGaesatae"
    default_seeds: SeedUnits = [["Celts-06", "Celts-14"], ["Celts-05", "Celts-12"]]

    def seed_units(self, drafter: ArmyDrafter, requested: SeedUnits | None) -> SeedUnits:
        if requested:
            return super(CeltsPolicy, self).seed_units(drafter, requested)
        return self.affordable(drafter, self.default_seeds)


class RomansPolicy(RecyclingPolicy):
    """At most one catapult per 40 points."""

    name = "Romans"
    faction = "Romans"
    recycled_names = frozenset({"Aquilifer"})
    catapults = frozenset({"Romans-03", "Romans-04", "Romans-05"})
    points_per_catapult = 40

    def __init__(self) -> None:
        self.max_catapults = 0

    def reset(self, drafter: ArmyDrafter) -> None:
        self.max_catapults = drafter.points // self.points_per_catapult

    def should_skip(self, drafter: ArmyDrafter, troop: Troop) -> bool:
        if troop.reference not in self.catapults:
            return super().should_skip(drafter, troop)
        existing = sum(1 for t in drafter.drafted_troops() if t.reference in self.catapults)
        return existing + 1 > self.max_catapults


class ElvesPolicy(RecyclingPolicy):
    """Cap single-troop formations at one per 30 points."""

    name = "Elves"
    faction = "Elves"
    recycled_names = frozenset({"Pathfinders", "Captain", "Champion"})
    points_per_single = 30

    def __init__(self) -> None:
        self.max_single_troop_units = 0
        self.single_troop_units = 0

    def reset(self, drafter: ArmyDrafter) -> None:
        self.max_single_troop_units = drafter.points // self.points_per_single
        self.single_troop_units = 0

    def should_skip(self, drafter: ArmyDrafter, troop: Troop) -> bool:
        if troop.formation != 1:
            return super().should_skip(drafter, troop)
        if self.single_troop_units >= self.max_single_troop_units:
            return True
        self.single_troop_units += 1
        return False


class OrcsPolicy(RecyclingPolicy):
    """Start with both Kobolds in their own units."""

    name = "Orcs"
    faction = "Orcs"
    recycled_names = frozenset({"Standard Bearer"})
    default_seeds: SeedUnits = [["Orcs-29"], ["Orcs-30"]]

    def seed_units(self, drafter: ArmyDrafter, requested: SeedUnits | None) -> SeedUnits:
        if requested:
            return super().seed_units(drafter, requested)
        return self.affordable(drafter, self.default_seeds)


class MacedoniansPolicy(RecyclingPolicy):
    name = "Macedonians"
    faction = "Macedonians"
    recycled_names = frozenset({"Standard Bearer", "Chiliarch", "Alexandros", "Agema"})


class PersiansPolicy(RecyclingPolicy):
    name = "Persians"
    faction = "Persians"
    recycled_names = frozenset({"Standard Bearer", "Darius"})


_POLICIES: dict[str, type[FactionPolicy]] = {
    policy.name: policy
    for policy in (
        CeltsPolicy,
        CeltsFastGaesataePolicy,
        RomansPolicy,
        ElvesPolicy,
        OrcsPolicy,
        MacedoniansPolicy,
        PersiansPolicy,
    )
}


def available_policies() -> list[str]:
    return sorted(_POLICIES)


def policy_for(faction_name: str, variant: str | None = None) -> FactionPolicy:
    """Return a fresh policy for ``faction_name``, or for a named ``variant``.

    Factions without a dedicated policy get the generic :class:`FactionPolicy`.

    Raises:
        UnknownPolicyError: If ``variant`` is not a registered policy of ``faction_name``.
    """

    if variant is None:
        return _POLICIES.get(faction_name, FactionPolicy)()

    policy_cls = _POLICIES.get(variant)
    if policy_cls is None or policy_cls.faction != faction_name:
        known = sorted(name for name, cls in _POLICIES.items() if cls.faction == faction_name)
        raise UnknownPolicyError(
            f"unknown policy variant {variant!r} for {faction_name}; "
            f"available: {', '.join(known) or 'none'}"
        )
    return policy_cls()


def referenced_troops(seeds: Iterable[Iterable[str]]) -> set[str]:
    return {ref for refs in seeds for ref in refs}
