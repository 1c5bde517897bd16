"""Runtime primitives backing the pocketdraft HTTP API."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pocketdraft.config import Settings, get_settings
from pocketdraft.domain.catalog import Catalog
from pocketdraft.domain.drafting import draft
from pocketdraft.domain.enums import Strategy
from pocketdraft.domain.models import Army, Faction, Troop, Unit
from pocketdraft.domain.policies import SeedUnits
from pocketdraft.repository import YamlCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DraftOrder:
    """API-facing parameters for a new draft."""

    faction: str
    points: int | None = None
    strategy: Strategy | None = None
    seed_units: SeedUnits | None = None
    variant: str | None = None
    seed: str | None = None


class DraftService:
    """Drafting entry point bound to one catalog and settings."""

    def __init__(self, catalog: Catalog, settings: Settings) -> None:
        self._catalog = catalog
        self._settings = settings

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def draft(self, order: DraftOrder) -> tuple[Army, Strategy, int]:
        """Draft an army, filling unset parameters from the settings."""

        strategy = order.strategy or self._settings.default_strategy
        points = order.points if order.points is not None else self._settings.default_points
        seed = order.seed if order.seed is not None else self._settings.rng_seed
        army = draft(
            order.faction,
            points,
            strategy,
            order.seed_units,
            catalog=self._catalog,
            variant=order.variant,
            seed=seed,
        )
        return army, strategy, points

    @staticmethod
    def troop_to_dict(troop: Troop) -> dict[str, object]:
        return {
            "reference": troop.reference,
            "number": troop.number,
            "name": troop.name,
            "points": troop.points,
            "formation": troop.formation,
            "wounds": troop.wounds,
            "engagement": list(troop.engagement),
            "shooting": list(troop.shooting),
            "powers": list(troop.powers),
        }

    def faction_to_dict(self, faction: Faction) -> dict[str, object]:
        return {
            "name": faction.name,
            "troops": [self.troop_to_dict(t) for t in faction.troops],
        }

    @staticmethod
    def unit_to_dict(unit: Unit) -> dict[str, object]:
        troops = unit.sorted_troops()
        return {
            "troops": [t.reference for t in troops],
            "names": [t.name for t in troops],
            "points": unit.points,
            "wounds": unit.wounds,
            "formation": unit.min_formation,
            "engagement_dice": sorted(unit.engagement_dice),
            "shooting_dice": sorted(unit.shooting_dice),
            "powers": unit.unique_powers,
        }

    def army_to_dict(
        self, army: Army, *, faction: str, strategy: Strategy, requested_points: int
    ) -> dict[str, object]:
        return {
            "faction": faction,
            "strategy": strategy.value,
            "requested_points": requested_points,
            "points": army.points,
            "units": [self.unit_to_dict(u) for u in army.units],
            "powers": army.powers,
            "summary": army.summary(longer=True),
        }


@dataclass(slots=True)
class ApiState:
    """Shared state stored on the FastAPI application."""

    settings: Settings
    drafts: DraftService


def build_state(settings: Settings | None = None) -> ApiState:
    """Load the catalog from the configured data directory."""

    settings = settings or get_settings()
    catalog = YamlCatalogRepository(settings.data_dir).load()
    logger.info("Serving %s factions from %s", len(catalog.faction_names()), settings.data_dir)
    return ApiState(settings=settings, drafts=DraftService(catalog, settings))
