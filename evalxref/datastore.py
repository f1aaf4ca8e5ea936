"""Catalog source - loads the catalog snapshot once per process."""

from functools import lru_cache

from evalxref.config import settings
from evalxref.schemas.checks import ConsistencyPolicy
from evalxref.storage.catalog import CatalogStore, load_catalog


@lru_cache(maxsize=1)
def _load() -> CatalogStore:
    return load_catalog(settings.catalog_path)


def get_catalog() -> CatalogStore:
    """Dependency for the shared read-only catalog."""
    return _load()


def get_policy() -> ConsistencyPolicy:
    """Dependency for the configured consistency policy."""
    return settings.consistency_policy()
