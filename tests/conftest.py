"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`pocketdraft` package without requiring an editable install in CI, and
provides small factories for troops and catalogs.
"""

import sys
from pathlib import Path

import pytest
import yaml

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from pocketdraft.domain.catalog import Catalog  # noqa: E402
from pocketdraft.domain.models import Faction, Troop  # noqa: E402


def _troop(
    number: int,
    name: str | None = None,
    *,
    faction: str = "Testers",
    points: int = 5,
    formation: int = 3,
    wounds: int = 1,
    engagement: str = "",
    shooting: str = "",
    powers: tuple[str, ...] = (),
) -> Troop:
    return Troop(
        faction=faction,
        number=number,
        name=name or f"Troop {number}",
        points=points,
        formation=formation,
        wounds=wounds,
        engagement=tuple(f for f in engagement.split("-") if f),
        shooting=tuple(f for f in shooting.split("-") if f),
        powers=tuple(powers),
    )


@pytest.fixture
def make_troop():
    """Build a troop; dice are given as dash separated faces, e.g. ``"4-5-6"``."""

    return _troop


@pytest.fixture
def make_catalog():
    """Build a single-faction catalog from troops."""

    def factory(*troops: Troop, name: str | None = None) -> Catalog:
        faction_name = name or (troops[0].faction if troops else "Testers")
        return Catalog([Faction(name=faction_name, troops=tuple(troops))])

    return factory


@pytest.fixture
def write_faction():
    """Write ``<name>.yaml`` into a data directory and return its path."""

    def factory(data_dir: Path, name: str, records: dict[int, dict]) -> Path:
        path = data_dir / f"{name}.yaml"
        path.write_text(yaml.safe_dump(records, sort_keys=False), encoding="utf-8")
        return path

    return factory
