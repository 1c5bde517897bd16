"""Protocol-based interfaces for pocketdraft collaborators.

This module exports the protocols the drafting engine depends on, enabling
dependency injection of catalogs in production and tests alike.
"""

from pocketdraft.interfaces.catalog import ICatalog

__all__ = ["ICatalog"]
