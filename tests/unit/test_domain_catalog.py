"""Unit tests for catalog construction."""

from __future__ import annotations

import pytest

from pocketdraft.domain.catalog import Catalog, CatalogError, build_faction
from pocketdraft.domain.models import UNBOUNDED_FORMATION


def _records() -> dict[int, dict[str, object]]:
    return {
        2: {"name": "Warband", "engagement": ["4", "5"]},
        1: {
            "name": "Warband",
            "points": 4,
            "formation": 3,
            "wounds": 1,
            "engagement": ["5", "6"],
            "powers": ["Impetus"],
        },
        3: {"name": "Chariot", "points": 6, "formation": "*", "wounds": 2, "shooting": ["6"]},
    }


def test_build_faction_orders_by_number():
    faction = build_faction("Celts", _records())
    assert [t.reference for t in faction.troops] == ["Celts-01", "Celts-02", "Celts-03"]


def test_partial_troops_are_backfilled():
    faction = build_faction("Celts", _records())
    copy = faction.troop_by_number(2)
    assert copy.points == 4
    assert copy.formation == 3
    assert copy.wounds == 1
    assert copy.powers == ("Impetus",)
    # Dice stay the copy's own.
    assert copy.engagement == ("4", "5")
    assert not copy.complete
    assert faction.troop_by_number(1).complete


def test_wildcard_formation_is_unbounded():
    faction = build_faction("Celts", _records())
    assert faction.troop_by_number(3).formation == UNBOUNDED_FORMATION


def test_partial_troop_without_reference_fails():
    with pytest.raises(CatalogError, match="no points"):
        build_faction("Celts", {1: {"name": "Ghost"}})


def test_complete_troop_without_formation_fails():
    with pytest.raises(CatalogError, match="no formation"):
        build_faction("Celts", {1: {"name": "Ghost", "points": 3}})


def test_catalog_lookups():
    celts = build_faction("Celts", _records())
    romans = build_faction("Romans", {1: {"name": "Legionary", "points": 5, "formation": 2}})
    catalog = Catalog([romans, celts])

    assert catalog.faction_names() == ["Celts", "Romans"]
    assert [f.name for f in catalog.factions()] == ["Celts", "Romans"]
    assert catalog.get_faction("Celts") is celts
    assert catalog.get_faction("Orcs") is None
    assert "Romans" in catalog
    assert catalog.has_faction("Romans")
    assert len(catalog) == 2
    assert catalog.troop_by_ref("Romans-01").name == "Legionary"
    assert catalog.troop_by_ref("Orcs-01") is None
