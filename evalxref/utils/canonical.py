"""Canonical JSON and hashing utilities."""

import hashlib
import json
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel

from evalxref.storage.catalog import CatalogStore


def _canonical_value(obj: Any) -> Any:
    """Convert value for canonical representation."""
    if obj is None:
        return None
    if isinstance(obj, BaseModel):
        return _canonical_value(obj.model_dump(mode="json"))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, (int, float)):
        return obj
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {str(k): _canonical_value(v) for k, v in sorted(obj.items())}
    if isinstance(obj, (list, tuple)):
        return [_canonical_value(v) for v in obj]
    if isinstance(obj, str):
        return obj
    return str(obj)


def canonical_json(obj: Any) -> str:
    """Produce canonical JSON string (sorted keys, consistent formatting)."""
    canonical = _canonical_value(obj)
    return json.dumps(canonical, sort_keys=True, separators=(",", ":"))


def catalog_hash(catalog: CatalogStore) -> str:
    """SHA256 fingerprint of the catalog snapshot."""
    return hashlib.sha256(canonical_json(catalog.to_dict()).encode()).hexdigest()
