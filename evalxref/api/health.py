"""Health and metrics endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from evalxref.datastore import get_catalog
from evalxref.storage.catalog import CatalogStore
from evalxref.utils.canonical import catalog_hash

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/metrics")
async def metrics(catalog: Annotated[CatalogStore, Depends(get_catalog)]):
    """Catalog counts and snapshot fingerprint."""
    return {
        "service": "evalxref",
        "version": "0.1.0",
        "catalog": catalog.counts(),
        "catalog_hash": catalog_hash(catalog),
    }
