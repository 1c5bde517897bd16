"""Army drafting engine.

Most basic use::

    army = draft("Celts", 30, "heuristic", catalog=catalog)

or, for repeated drafts or a specific policy variant::

    drafter = ArmyDrafter(catalog, "Celts", 60, Strategy.HEURISTIC,
                          policy=policy_for("Celts", "Celts-FastGaesatae"))
    army = drafter.draft()
    drafter.reset()
    another = drafter.draft()

The simple strategy wraps shuffled troops into single-troop units until the
budget is spent; the last troop may overshoot the budget. The heuristic
strategy seeds open units, then places each shuffled troop into the first
open unit that both accepts it and the faction policy approves of. Troops
that fit nowhere are recycled into the pool (at most ``max_recycles`` times)
or start a new unit. Full units move into the army as soon as they fill up;
whatever is still open when the budget or the pool runs out joins the army
as is.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from pocketdraft.interfaces import ICatalog
from pocketdraft.utils.rng import generate_seed, make_rng, shuffled

from .enums import Strategy
from .models import Army, CompositionError, Faction, Troop, Unit
from .policies import FactionPolicy, SeedUnits, policy_for
from .rules_config import DEFAULT_RULES, DraftRules

logger = logging.getLogger(__name__)


class DraftError(RuntimeError):
    """Base class for drafting failures."""


class FactionNotFoundError(DraftError, LookupError):
    """Raised when the requested faction is not in the catalog."""


class UnsupportedStrategyError(DraftError, ValueError):
    """Raised when the requested strategy is unknown."""


class SeedTroopNotFoundError(DraftError, LookupError):
    """Raised when a seed unit names a troop missing from the draft pool."""


class DraftFailedError(DraftError):
    """Raised when the drafted army breaks the composition rules."""

    def __init__(self, message: str, violation: CompositionError) -> None:
        super().__init__(message)
        self.violation = violation


def parse_strategy(strategy: Strategy | str) -> Strategy:
    try:
        return Strategy(strategy)
    except ValueError as exc:
        raise UnsupportedStrategyError(f"can't handle strategy {strategy!r}") from exc


class ArmyDrafter:
    """Stateful drafter for one faction, budget and strategy.

    ``draft`` memoises its result; call ``reset`` to draft again.
    """

    def __init__(
        self,
        catalog: ICatalog,
        faction_name: str,
        points: int,
        strategy: Strategy | str = Strategy.SIMPLE,
        seed_units: SeedUnits | None = None,
        *,
        policy: FactionPolicy | None = None,
        rng: random.Random | None = None,
        rules: DraftRules = DEFAULT_RULES,
    ) -> None:
        faction = catalog.get_faction(faction_name)
        if faction is None:
            raise FactionNotFoundError(f"{faction_name} is not a known faction")

        self.faction: Faction = faction
        self.points = points
        self.strategy = parse_strategy(strategy)
        self.requested_seed_units = seed_units
        self.policy = policy if policy is not None else policy_for(faction.name)
        self.rules = rules
        self._rng = rng if rng is not None else make_rng()

        self.reset()

    def reset(self) -> None:
        """Prepare this drafter for another draft."""

        self._army = Army()
        self._pool: list[Troop] = list(self.faction.troops)
        self._points_left = self.points
        self._open_units: list[Unit] = []
        self._seeded_units: list[Unit] = []
        self._recycled: dict[str, int] = {}
        self.policy.reset(self)

    # --- state visible to policies ---------------------------------------------

    @property
    def army(self) -> Army:
        return self._army

    @property
    def pool(self) -> Sequence[Troop]:
        """Troops not yet considered, in draw order."""

        return tuple(self._pool)

    @property
    def open_units(self) -> Sequence[Unit]:
        return tuple(self._open_units)

    @property
    def points_left(self) -> int:
        return self._points_left

    @property
    def recycle_counts(self) -> dict[str, int]:
        return dict(self._recycled)

    def drafted_troops(self) -> list[Troop]:
        """Troops already placed, in open units or in the army."""

        placed = [troop for unit in self._open_units for troop in unit.troops]
        return placed + self._army.troops

    # --- drafting --------------------------------------------------------------

    def draft(self) -> Army:
        """Draft an army, raising :class:`DraftFailedError` if it doesn't validate."""

        if self._army.size > 0:
            return self._army

        logger.info(
            "Drafting %s for %s points with %s strategy (%s policy)",
            self.faction.name,
            self.points,
            self.strategy,
            self.policy.name,
        )

        if self.strategy is Strategy.SIMPLE:
            self._fill()
        else:
            self._seed()
            self._assign()
            self._merge()

        try:
            self._army.validate()
        except CompositionError as exc:
            raise DraftFailedError(f"got invalid army: {exc}", exc) from exc

        logger.info(
            "Drafted %s units worth %s points for %s",
            self._army.size,
            self._army.points,
            self.faction.name,
        )
        return self._army

    def _fill(self) -> None:
        self._pool = shuffled(self._rng, self._pool)
        # The last troop is not checked against the budget and may overshoot it.
        while self._points_left > 0 and self._pool:
            troop = self._pool.pop(0)
            self._army.add_unit(Unit([troop]))
            self._points_left -= troop.points
            logger.debug("%s points left after drafting %s", self._points_left, troop)

    def _seed(self) -> None:
        for refs in self.policy.seed_units(self, self.requested_seed_units):
            unit = Unit()
            for ref in refs:
                troop = next((t for t in self._pool if t.reference == ref), None)
                if troop is None:
                    raise SeedTroopNotFoundError(
                        f"can't find seed troop {ref} in {self.faction.name}"
                    )
                unit.add(troop)
            self._open_units.append(unit)
        self._seeded_units = list(self._open_units)

        seeded = {t.reference for unit in self._open_units for t in unit.troops}
        self._pool = [t for t in self._pool if t.reference not in seeded]
        self._points_left -= sum(u.points for u in self._open_units)
        self._pool = shuffled(self._rng, self._pool)
        if self._open_units:
            logger.debug("Seeded open units: %s", self._open_units)

    def _assign(self) -> None:
        while self._points_left > 0 and self._pool:
            troop = self._pool.pop(0)
            logger.debug("%s points left: considering %s", self._points_left, troop)

            if troop is None or self._points_left - troop.points < 0:
                continue
            if self.policy.should_skip(self, troop):
                logger.debug("Skipping %s", troop)
                continue

            unit = self._find_open_unit(troop)
            if unit is not None:
                unit.add(troop)
                logger.debug("Added %s to %s", troop, unit)
            elif self._recycle(troop):
                continue
            else:
                unit = Unit([troop])
                if unit.is_full and unit.wounds < 1:
                    logger.debug("Skipping %s, it can never form a unit with wounds", troop)
                    continue
                self._open_units.append(unit)
                logger.debug("Created new unit %s", unit)

            self._points_left -= troop.points
            self._flush_full_units()

    def _find_open_unit(self, troop: Troop) -> Unit | None:
        for unit in self._open_units:
            if unit.can_add(troop) and self.policy.is_smart_fit(self, unit, troop):
                return unit
        return None

    def _recycle(self, troop: Troop) -> bool:
        """Put ``troop`` back into the pool if the policy asks for it and retries remain."""

        if not self.policy.should_recycle(troop):
            return False
        count = self._recycled.get(troop.reference, 0)
        if count >= self.rules.max_recycles:
            logger.debug("Not recycling %s, exceeded %s retries", troop, count)
            return False
        position = 1 + self._rng.randrange(len(self._pool)) if self._pool else 0
        self._pool.insert(position, troop)
        self._recycled[troop.reference] = count + 1
        logger.debug("Recycled %s to position %s", troop, position)
        return True

    def _flush_full_units(self) -> None:
        full = [u for u in self._open_units if u.is_full]
        if not full:
            return
        self._open_units = [u for u in self._open_units if not u.is_full]
        for unit in full:
            logger.debug("Moving full unit to army: %s", unit)
            self._army.add_unit(unit)

    def _merge(self) -> None:
        for unit in self._open_units:
            if unit.wounds < 1 and not any(unit is s for s in self._seeded_units):
                # Woundless leftovers are not fielded; their points go back.
                logger.debug("Dropping woundless unit %s", unit)
                self._points_left += unit.points
                continue
            self._army.add_unit(unit)
        self._open_units = []

    def status(self) -> str:
        """One-line accounting of the draft so far."""

        open_points = sum(u.points for u in self._open_units)
        total = open_points + self._army.points + self._points_left
        return (
            f"open_units {open_points} + army {self._army.points} + "
            f"points_left {self._points_left} = {total} total points"
        )


def draft(
    faction_name: str,
    points: int,
    strategy: Strategy | str = Strategy.HEURISTIC,
    seed_units: SeedUnits | None = None,
    *,
    catalog: ICatalog,
    variant: str | None = None,
    rng: random.Random | None = None,
    seed: str | None = None,
) -> Army:
    """Draft an army for ``faction_name`` worth about ``points``.

    ``variant`` selects a named policy (e.g. ``"Celts-FastGaesatae"``); by
    default the faction's own policy is used. A variant that is unknown or
    belongs to another faction raises :class:`UnknownPolicyError`. Pass ``rng``
    or a ``seed`` string for a reproducible draft.
    """

    if catalog.get_faction(faction_name) is None:
        raise FactionNotFoundError(f"{faction_name} is not a known faction")
    parsed = parse_strategy(strategy)
    if rng is None and seed is not None:
        rng = make_rng(generate_seed(faction_name, points, parsed.value, seed))

    drafter = ArmyDrafter(
        catalog,
        faction_name,
        points,
        parsed,
        seed_units,
        policy=policy_for(faction_name, variant),
        rng=rng,
    )
    return drafter.draft()
