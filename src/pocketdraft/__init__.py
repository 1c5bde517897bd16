"""Army drafting for the Pocket Battles tile wargame."""

from pocketdraft.domain.catalog import Catalog
from pocketdraft.domain.drafting import ArmyDrafter, draft
from pocketdraft.domain.enums import Strategy

__all__ = ["ArmyDrafter", "Catalog", "Strategy", "draft"]

__version__ = "0.1.0"
