"""Domain model for pocketdraft.

This package hosts everything needed to draft a Pocket Battles army purely
in-memory. It exposes:

* Dataclasses for troops and factions, and the unit/army aggregates (see :mod:`models`).
* The troop capability model (see :mod:`capabilities`) and power glossary.
* Drafting constants (see :mod:`rules_config`).
* Faction policies and the drafting engine (see :mod:`policies`, :mod:`drafting`).
* Points and consistency tools (see :mod:`analysis`).
"""

from . import (
    analysis,
    capabilities,
    catalog,
    drafting,
    enums,
    models,
    policies,
    powers,
    rules_config,
)

__all__ = [
    "analysis",
    "capabilities",
    "catalog",
    "drafting",
    "enums",
    "models",
    "policies",
    "powers",
    "rules_config",
]
