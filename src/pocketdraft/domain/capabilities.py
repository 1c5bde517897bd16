"""Troop capability model.

Pure predicates classifying a single troop (or a pair of troops) by what it
contributes to a unit: native dice, powers that boost shooting or
engagement, and support-only powers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .powers import normalize_power

if TYPE_CHECKING:
    from .models import Troop

AUXILIARY = "Auxiliary"

# Powers that boost a unit's shooting even without shooting dice.
SHOOTING_SUPPORT_POWERS = frozenset(
    {
        "+x shooting",
        "wide arc",
        "long range",
        "auxiliary",
        "first strike",
        "skirmish",
        "+x wounds",
    }
)

# Powers that boost a unit's engagement even without engagement dice.
ENGAGEMENT_SUPPORT_POWERS = frozenset(
    {
        "+x engagement",
        "overwhelming",
        "impetus",
        "fury",
        "flying",
        "scout",
        "auxiliary",
        "first strike",
        "skirmish",
        "+x wounds",
    }
)

SUPPORT_POWERS = frozenset(
    {
        "excite",
        "leader",
        "double order",
        "heal",
        "control",
        "galvanize",
        "prestige",
        "sacrifice",
        "tough",
    }
)


def _has_power_in(troop: Troop, category: frozenset[str]) -> bool:
    return any(normalize_power(power).lower() in category for power in troop.powers)


def is_auxiliary(troop: Troop) -> bool:
    """Auxiliary troops ignore formation limits; one may join any unit."""

    return troop.has_power(AUXILIARY)


def is_shooting(troop: Troop) -> bool:
    return bool(troop.shooting)


def is_engagement(troop: Troop) -> bool:
    return bool(troop.engagement)


def has_shooting_support_power(troop: Troop) -> bool:
    return _has_power_in(troop, SHOOTING_SUPPORT_POWERS)


def has_engagement_support_power(troop: Troop) -> bool:
    return _has_power_in(troop, ENGAGEMENT_SUPPORT_POWERS)


def is_fighting(troop: Troop) -> bool:
    return is_shooting(troop) or is_engagement(troop)


def is_combat(troop: Troop) -> bool:
    """Whether the troop needs to be part of a combat unit."""

    return (
        is_fighting(troop)
        or has_shooting_support_power(troop)
        or has_engagement_support_power(troop)
    )


def is_support_only(troop: Troop) -> bool:
    return not is_combat(troop) and _has_power_in(troop, SUPPORT_POWERS)


def _shares_shooting(a: Troop, b: Troop) -> bool:
    return (
        (is_shooting(a) and is_shooting(b))
        or (is_shooting(a) and has_shooting_support_power(b))
        or (has_shooting_support_power(a) and is_shooting(b))
    )


def _shares_engagement(a: Troop, b: Troop) -> bool:
    return (
        (is_engagement(a) and is_engagement(b))
        or (is_engagement(a) and has_engagement_support_power(b))
        or (has_engagement_support_power(a) and is_engagement(b))
    )


def is_compatible(a: Troop, b: Troop) -> bool:
    """Base legality gate for putting two troops in the same unit."""

    if is_auxiliary(a) or is_auxiliary(b):
        return True
    if a.formation <= 1 or b.formation <= 1:
        return False
    return _shares_shooting(a, b) or _shares_engagement(a, b)

