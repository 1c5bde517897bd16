"""YAML-based repository for faction data."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from pocketdraft.domain.catalog import Catalog, CatalogError, build_faction
from pocketdraft.domain.models import Faction
from pocketdraft.schemas import TroopRecord

logger = logging.getLogger(__name__)

_FACTION_FILE = re.compile(r"^([-A-Za-z0-9]+)\.ya?ml$")


class YamlCatalogRepository:
    """Load factions from ``<FactionName>.yaml`` files in a directory.

    Each file maps tile numbers to troop records (see :class:`TroopRecord`).
    """

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)

    def list_faction_files(self) -> list[Path]:
        """Return faction data files, sorted by name."""

        files: list[Path] = []
        for path in sorted(self.base_path.iterdir()):
            if not path.is_file() or path.suffix not in (".yaml", ".yml"):
                continue
            if _FACTION_FILE.match(path.name) is None:
                logger.warning("Skipping %s: not a faction data file name", path)
                continue
            files.append(path)
        return files

    def load_faction(self, path: Path) -> Faction:
        """Parse a single faction file, named after its faction."""

        match = _FACTION_FILE.match(path.name)
        if match is None:
            raise CatalogError(f"{path.name} is not a faction data file name")
        faction_name = match.group(1)

        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            if not isinstance(raw, dict):
                raise CatalogError("expected a mapping of troop numbers to troops")
            records = {
                int(number): TroopRecord.model_validate(data).model_dump()
                for number, data in raw.items()
            }
            return build_faction(faction_name, records)
        except (yaml.YAMLError, ValidationError, ValueError, TypeError) as exc:
            raise CatalogError(f"couldn't parse {path}: {exc}") from exc

    def load(self) -> Catalog:
        """Load every faction file into a :class:`Catalog`."""

        factions = [self.load_faction(path) for path in self.list_faction_files()]
        logger.info("Loaded %s factions from %s", len(factions), self.base_path)
        return Catalog(factions)
