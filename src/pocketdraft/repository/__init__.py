"""Persistence adapters for pocketdraft."""

from .yaml_store import YamlCatalogRepository

__all__ = ["YamlCatalogRepository"]
