"""Read-only catalog store and JSON loader."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from evalxref.schemas.catalog import (
    CatalogDocument,
    Container,
    EvaluationRecord,
    Evaluator,
    Leaf,
    System,
    shape_for,
)

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when a catalog source cannot be turned into a store."""


def _index(items: Iterable[Any], kind: str) -> MappingProxyType:
    index: dict[str, Any] = {}
    for item in items:
        if item.id in index:
            raise CatalogLoadError(f"Duplicate {kind} id: {item.id}")
        index[item.id] = item
    return MappingProxyType(index)


class CatalogStore:
    """
    Immutable snapshot of systems, evaluators and evaluations.
    Lookups return None for unknown ids; nothing here raises on a miss.
    """

    def __init__(
        self,
        systems: Iterable[System] = (),
        evaluators: Iterable[Evaluator] = (),
        evaluations: Iterable[EvaluationRecord] = (),
    ):
        self._systems = _index(systems, "system")
        self._evaluators = _index(evaluators, "evaluator")
        self._evaluations = _index(evaluations, "evaluation")
        # Leaf/Container classification happens once, here
        self._shapes = MappingProxyType(
            {eid: shape_for(rec) for eid, rec in self._evaluations.items()}
        )

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogStore":
        """Build a store from the JSON document layout."""
        try:
            doc = CatalogDocument.model_validate(data)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid catalog: {e}") from e
        return cls(doc.systems, doc.evaluators, doc.evaluations)

    def find_system(self, system_id: str | None) -> System | None:
        return self._systems.get(system_id) if system_id is not None else None

    def find_evaluator(self, evaluator_id: str | None) -> Evaluator | None:
        return self._evaluators.get(evaluator_id) if evaluator_id is not None else None

    def find_evaluation(self, evaluation_id: str | None) -> EvaluationRecord | None:
        return self._evaluations.get(evaluation_id) if evaluation_id is not None else None

    def shape_of(self, evaluation_id: str | None) -> Leaf | Container | None:
        return self._shapes.get(evaluation_id) if evaluation_id is not None else None

    def systems(self) -> tuple[System, ...]:
        return tuple(self._systems.values())

    def evaluators(self) -> tuple[Evaluator, ...]:
        return tuple(self._evaluators.values())

    def evaluations(self) -> tuple[EvaluationRecord, ...]:
        return tuple(self._evaluations.values())

    def counts(self) -> dict[str, int]:
        """Entity counts, for metrics."""
        return {
            "systems": len(self._systems),
            "evaluators": len(self._evaluators),
            "evaluations": len(self._evaluations),
        }

    def to_dict(self) -> dict:
        """JSON-ready document, inverse of from_dict."""
        return {
            "systems": [s.model_dump(mode="json") for s in self._systems.values()],
            "evaluators": [
                e.model_dump(mode="json", by_alias=True) for e in self._evaluators.values()
            ],
            "evaluations": [
                r.model_dump(mode="json") for r in self._evaluations.values()
            ],
        }


def load_catalog(path: str | Path) -> CatalogStore:
    """Load a catalog JSON file into a store."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise CatalogLoadError(f"Catalog {path} must be a JSON object")

    store = CatalogStore.from_dict(data)
    counts = store.counts()
    logger.info(
        "Loaded catalog %s: %d systems, %d evaluators, %d evaluations",
        path,
        counts["systems"],
        counts["evaluators"],
        counts["evaluations"],
    )
    return store
