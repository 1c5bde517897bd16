"""Declarative drafting constants."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class VarietyRules:
    """Die-face variety thresholds used by the generic smart-fit rule.

    A unit with more than ``roomy_slots`` free non-auxiliary slots is roomy.
    """

    roomy_slots: int = 1
    roomy_good_enough: int = 3
    roomy_minimum: int = 2
    tight_good_enough: int = 4
    tight_minimum: int = 3

    def thresholds(self, free_slots: int) -> tuple[int, int]:
        """Return ``(good_enough, minimum)`` for a unit with ``free_slots`` left."""

        if free_slots > self.roomy_slots:
            return self.roomy_good_enough, self.roomy_minimum
        return self.tight_good_enough, self.tight_minimum


@dataclass(frozen=True, slots=True)
class DraftRules:
    """Aggregate drafting configuration."""

    max_recycles: int = 3
    variety: VarietyRules = field(default_factory=VarietyRules)


DEFAULT_RULES = DraftRules()
