"""Enumerations used by the drafting layer."""

from __future__ import annotations

from enum import StrEnum


class Strategy(StrEnum):
    """Drafting strategies.

    ``SIMPLE`` drafts single-troop units until the budget is spent.
    ``HEURISTIC`` builds multi-troop compatible units and honours seeds.
    """

    SIMPLE = "simple"
    HEURISTIC = "heuristic"

    @classmethod
    def _missing_(cls, value: object) -> Strategy | None:
        if isinstance(value, str):
            lowered = value.strip().lower()
            alias = _ALIASES.get(lowered, lowered)
            for member in cls:
                if member.value == alias:
                    return member
        return None


# Names used by the earlier drafting scripts.
_ALIASES = {
    "stupid": Strategy.SIMPLE.value,
    "compatible": Strategy.HEURISTIC.value,
}
