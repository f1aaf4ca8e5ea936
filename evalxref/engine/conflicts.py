"""Conflict resolver - turns declared conflict ids into actionable search links."""

import logging

from evalxref.engine.links import build_search_link
from evalxref.schemas.catalog import Evaluator
from evalxref.schemas.checks import ConflictLink
from evalxref.storage.catalog import CatalogStore

logger = logging.getLogger(__name__)

CONFLICT_NOTICE = (
    "This evaluator has a potential conflict-of-interest due to their "
    "relationship with the systems listed."
)


def disambiguation_query(evaluator_name: str, system_name: str) -> str:
    return f"How is {evaluator_name} connected to {system_name}?"


def conflict_tooltip(system_name: str, query: str) -> str:
    return f"Click to start a {system_name} search in a new tab: {query}"


def resolve_conflicts(
    evaluator: Evaluator | None,
    catalog: CatalogStore,
) -> list[ConflictLink]:
    """
    Resolve an evaluator's conflict ids in declared order.
    Duplicates are kept; ids missing from the catalog are skipped.
    """
    if catalog is None:
        raise ValueError("catalog is required")
    if evaluator is None:
        return []

    links: list[ConflictLink] = []
    for system_id in evaluator.conflicts:
        system = catalog.find_system(system_id)
        if system is None:
            logger.debug(
                "Evaluator %s declares conflict with unknown system %s",
                evaluator.id,
                system_id,
            )
            continue
        query = disambiguation_query(evaluator.name, system.name)
        links.append(
            ConflictLink(
                system_id=system.id,
                system_name=system.name,
                search_link=build_search_link(system.search_link, query),
                disambiguation_query=query,
                tooltip=conflict_tooltip(system.name, query),
            )
        )
    return links


def resolve_conflicts_for_evaluation(
    evaluation_id: str,
    catalog: CatalogStore,
) -> list[ConflictLink]:
    """Conflicts of the evaluator who authored an evaluation; [] if either is unknown."""
    if catalog is None:
        raise ValueError("catalog is required")
    record = catalog.find_evaluation(evaluation_id)
    if record is None:
        return []
    return resolve_conflicts(catalog.find_evaluator(record.evaluator_id), catalog)
