"""Catalog Protocol Interface.

This module defines the protocol (interface) the drafting engine consumes to
look up factions and their troops.
"""

from typing import Protocol

from pocketdraft.domain.models import Faction


class ICatalog(Protocol):
    """Protocol defining read access to faction data.

    Implementations must have resolved partially specified troops (see
    :func:`pocketdraft.domain.catalog.build_faction`) before handing factions
    to the engine.
    """

    def get_faction(self, name: str) -> Faction | None:
        """Look up a faction by name.

        Args:
            name: Faction name, e.g. ``"Celts"``

        Returns:
            The faction, or None when the catalog does not know it
        """
        ...

    def faction_names(self) -> list[str]:
        """Return every known faction name, sorted."""
        ...
