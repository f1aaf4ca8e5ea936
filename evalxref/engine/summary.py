"""Evaluation summary - everything a card needs about one record, precomputed."""

from evalxref.engine.conflicts import CONFLICT_NOTICE, resolve_conflicts
from evalxref.engine.consistency import run_checks
from evalxref.engine.links import build_search_link
from evalxref.schemas.catalog import EvaluationRecord
from evalxref.schemas.checks import (
    ConsistencyPolicy,
    EvaluationSummary,
    EvaluatorInfo,
    SystemLink,
)
from evalxref.storage.catalog import CatalogStore


def systems_evaluated(record: EvaluationRecord, catalog: CatalogStore) -> list[str]:
    """Names of the record's systems, skipping unknown ids."""
    names = []
    for system_id in record.systems:
        system = catalog.find_system(system_id)
        if system is not None:
            names.append(system.name)
    return names


def system_links(record: EvaluationRecord, catalog: CatalogStore) -> list[SystemLink]:
    """Re-run the record's query on each evaluated system (spaces kept as %20)."""
    links = []
    for system_id in record.systems:
        system = catalog.find_system(system_id)
        if system is None:
            continue
        links.append(
            SystemLink(
                system_id=system.id,
                name=system.name,
                search_link=build_search_link(
                    system.search_link, record.query, plus_for_space=False
                ),
            )
        )
    return links


def summarize_evaluation(
    evaluation_id: str,
    catalog: CatalogStore,
    reference_id: str | None = None,
    policy: ConsistencyPolicy | None = None,
    include_conflicts: bool = True,
) -> EvaluationSummary | None:
    """
    Build the summary for one record, or None when the id is unknown.
    Checks are only computed when a reference id is supplied.
    """
    if catalog is None:
        raise ValueError("catalog is required")
    record = catalog.find_evaluation(evaluation_id)
    if record is None:
        return None

    evaluator = catalog.find_evaluator(record.evaluator_id)
    conflicts = resolve_conflicts(evaluator, catalog) if include_conflicts else []

    return EvaluationSummary(
        id=record.id,
        query=record.query,
        date=record.date,
        url=record.url,
        evaluator=(
            EvaluatorInfo(
                id=evaluator.id, name=evaluator.name, role=evaluator.role, url=evaluator.url
            )
            if evaluator
            else None
        ),
        systems_evaluated=systems_evaluated(record, catalog),
        system_links=system_links(record, catalog),
        conflict_notice=CONFLICT_NOTICE if conflicts else None,
        conflicts=conflicts,
        shape=catalog.shape_of(record.id),
        is_reference=reference_id == record.id,
        checks=(
            run_checks(record.id, reference_id, catalog, policy)
            if reference_id is not None
            else None
        ),
    )
