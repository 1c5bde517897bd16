"""End-to-end drafts from YAML faction data through the faction policies."""

from __future__ import annotations

import random

import pytest

from pocketdraft.domain.drafting import draft
from pocketdraft.domain.models import Army
from pocketdraft.repository import YamlCatalogRepository

FACTIONS = {
    "Celts": {
        1: {"name": "Warband", "points": 4, "formation": 3, "wounds": 1, "engagement": "4-5"},
        2: {"name": "Warband", "engagement": "5-6"},
        3: {"name": "Warband", "engagement": "3-4"},
        4: {"name": "Warchief", "points": 5, "formation": 3, "wounds": 1, "engagement": "5",
            "powers": ["Leader"]},
        5: {"name": "Gaesatae", "points": 7, "formation": 4, "wounds": 1, "engagement": "5-6",
            "powers": ["Fury"]},
        6: {"name": "Gaesatae", "engagement": "4-6"},
        7: {"name": "Slingers", "points": 3, "formation": 3, "wounds": 1, "shooting": "5"},
        8: {"name": "Slingers", "shooting": "6"},
        9: {"name": "Chariot", "points": 6, "formation": 2, "wounds": 2, "engagement": "4-5",
            "shooting": "6"},
        10: {"name": "Druid", "points": 3, "formation": 1, "wounds": 1,
             "powers": ["Heal", "Auxiliary"]},
        11: {"name": "Bard", "points": 2, "formation": 1, "wounds": 1, "powers": ["Excite"]},
        12: {"name": "Horsemen", "points": 4, "formation": 2, "wounds": 1, "engagement": "4"},
        13: {"name": "Horsemen", "engagement": "5"},
        14: {"name": "Horsemen", "engagement": "6"},
    },
    "Romans": {
        1: {"name": "Hastati", "points": 5, "formation": 3, "wounds": 1, "engagement": "4-5"},
        2: {"name": "Principes", "points": 5, "formation": 3, "wounds": 1, "engagement": "5-6"},
        3: {"name": "Scorpio", "points": 4, "formation": 1, "wounds": 1, "shooting": "5-6"},
        4: {"name": "Scorpio", "shooting": "4-5"},
        5: {"name": "Onager", "points": 6, "formation": 1, "wounds": 1, "shooting": "6",
            "powers": ["Long Range"]},
        6: {"name": "Velites", "points": 3, "formation": 3, "wounds": 1, "shooting": "5"},
        7: {"name": "Aquilifer", "points": 3, "formation": 3, "wounds": 1, "powers": ["Leader"]},
        8: {"name": "Equites", "points": 5, "formation": 2, "wounds": 1, "engagement": "4"},
        9: {"name": "Triarii", "points": 6, "formation": 3, "wounds": 2, "engagement": "3-4-5"},
    },
    "Elves": {
        1: {"name": "Archers", "points": 4, "formation": 3, "wounds": 1, "shooting": "4-5"},
        2: {"name": "Archers", "shooting": "5-6"},
        3: {"name": "Pathfinders", "points": 3, "formation": 2, "wounds": 1, "shooting": "6",
            "powers": ["Scout"]},
        4: {"name": "Captain", "points": 4, "formation": 1, "wounds": 1, "engagement": "5",
            "powers": ["Leader"]},
        5: {"name": "Champion", "points": 5, "formation": 1, "wounds": 2, "engagement": "4-5-6"},
        6: {"name": "Treant", "points": 6, "formation": 1, "wounds": 2, "engagement": "3-4"},
        7: {"name": "Riders", "points": 5, "formation": 2, "wounds": 1, "engagement": "4-5"},
        8: {"name": "Spearmen", "points": 3, "formation": 3, "wounds": 1, "engagement": "4"},
    },
    "Orcs": {
        25: {"name": "Orcs", "points": 3, "formation": 3, "wounds": 1, "engagement": "4-5"},
        26: {"name": "Orcs", "engagement": "3-4"},
        27: {"name": "Standard Bearer", "points": 2, "formation": 3, "wounds": 1,
             "powers": ["Leader"]},
        28: {"name": "Wolf Riders", "points": 4, "formation": 2, "wounds": 1, "engagement": "5"},
        29: {"name": "Kobolds", "points": 1, "formation": 3, "wounds": 1, "engagement": "3"},
        30: {"name": "Kobolds", "engagement": "4"},
    },
}

SEEDS = range(12)


@pytest.fixture
def catalog(tmp_path, write_faction):
    for name, records in FACTIONS.items():
        write_faction(tmp_path, name, records)
    return YamlCatalogRepository(tmp_path).load()


def _unit_of(army: Army, reference: str):
    (unit,) = [u for u in army.units if reference in {t.reference for t in u}]
    return unit


@pytest.mark.parametrize("faction", sorted(FACTIONS))
@pytest.mark.parametrize("strategy", ["simple", "heuristic"])
def test_every_faction_drafts_legal_armies(catalog, faction, strategy):
    for seed in SEEDS:
        army = draft(faction, 40, strategy, catalog=catalog, rng=random.Random(seed))
        army.validate()
        assert army.size > 0
        if strategy == "heuristic":
            assert army.points <= 40


def test_celts_keep_gaesatae_apart(catalog):
    for seed in SEEDS:
        army = draft("Celts", 60, catalog=catalog, rng=random.Random(seed))
        first = _unit_of(army, "Celts-05")
        second = _unit_of(army, "Celts-06")
        assert first is not second


def test_small_celtic_armies_are_not_seeded(catalog):
    for seed in SEEDS:
        army = draft("Celts", 10, catalog=catalog, rng=random.Random(seed))
        assert army.points <= 10


def test_fast_gaesatae_ride_with_horsemen(catalog):
    for seed in SEEDS:
        army = draft(
            "Celts", 30, catalog=catalog, variant="Celts-FastGaesatae", rng=random.Random(seed)
        )
        assert _unit_of(army, "Celts-06") is _unit_of(army, "Celts-14")
        assert _unit_of(army, "Celts-05") is _unit_of(army, "Celts-12")


def test_romans_field_one_catapult_per_forty_points(catalog):
    catapults = {"Romans-03", "Romans-04", "Romans-05"}
    for seed in SEEDS:
        army = draft("Romans", 60, catalog=catalog, rng=random.Random(seed))
        assert sum(1 for t in army.troops if t.reference in catapults) <= 1


def test_elves_limit_single_troop_units(catalog):
    for seed in SEEDS:
        army = draft("Elves", 60, catalog=catalog, rng=random.Random(seed))
        assert sum(1 for t in army.troops if t.formation == 1) <= 2


def test_orcs_start_with_kobolds(catalog):
    for seed in SEEDS:
        army = draft("Orcs", 20, catalog=catalog, rng=random.Random(seed))
        assert _unit_of(army, "Orcs-29") is not _unit_of(army, "Orcs-30")


def test_seeded_drafts_repeat(catalog):
    first = draft("Romans", 40, catalog=catalog, seed="friday")
    second = draft("Romans", 40, catalog=catalog, seed="friday")
    assert first.summary(longer=True) == second.summary(longer=True)
